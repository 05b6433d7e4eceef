# backend/utils/navigation.py
from typing import Dict, Optional

from schemas.navigation import NavigationCommand

# Dashboard quick actions and the page each one opens
QUICK_ACTIONS: Dict[str, NavigationCommand] = {
    "add-product": NavigationCommand(page="products", intent="add"),
    "view-all": NavigationCommand(page="products", intent="view"),
    "reports": NavigationCommand(page="reports"),
    "settings": NavigationCommand(page="settings"),
}


def resolve_quick_action(action: str) -> Optional[NavigationCommand]:
    return QUICK_ACTIONS.get(action)
