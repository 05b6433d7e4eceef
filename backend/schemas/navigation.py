# backend/schemas/navigation.py
from typing import Literal, Optional
from pydantic import BaseModel

Page = Literal["dashboard", "products", "categories", "reports", "settings"]


# Returned by a quick action and interpreted by the client shell
class NavigationCommand(BaseModel):
    page: Page
    intent: Optional[Literal["add", "view"]] = None
