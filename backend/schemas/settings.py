# backend/schemas/settings.py
from typing import Literal, Optional
from pydantic import BaseModel, Field

Theme = Literal["light", "dark", "system"]


class Preferences(BaseModel):
    theme: Theme = "light"
    company_name: Optional[str] = None
    company_email: Optional[str] = None
    company_address: Optional[str] = None
    phone: Optional[str] = None

    # Notification switches
    low_stock_alerts: bool = True
    new_product_alerts: bool = True
    daily_reports: bool = False

    # Shown read-only on the settings page
    currency: Literal["SAR"] = Field("SAR", description="Default currency")
