"""Static navigation catalog shared by every menu session."""

from __future__ import annotations

from fabric_dashboard.models.menu import MenuItem

MENU_CATALOG: tuple[MenuItem, ...] = (
    MenuItem(id="orders", label="Siparişler", icon="ShoppingCart", path="/orders"),
    MenuItem(id="saved-costs", label="Kayıtlı Maliyetler", icon="Archive", path="/saved-costs"),
    MenuItem(id="fabric-prices", label="Kalite Fiyatları", icon="DollarSign", path="/fabric-prices"),
)


def default_order(catalog: tuple[MenuItem, ...] = MENU_CATALOG) -> list[str]:
    """Catalog identifiers in declaration order."""
    return [item.id for item in catalog]


def catalog_ids(catalog: tuple[MenuItem, ...] = MENU_CATALOG) -> set[str]:
    return {item.id for item in catalog}
