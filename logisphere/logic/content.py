"""Fixed descriptive text for the welcome screen and department panels."""

from __future__ import annotations

from typing import Dict, Tuple

WELCOME_SCREEN = "WELCOME"

INVENTORY = "Inventory Management"
SUPPLIERS = "Supplier & Vendor Management"
FLEET = "Fleet Management"
WAREHOUSE = "Warehouse Management"
CUSTOMER = "Customer Options"

# Button order in the navigation row
DEPARTMENTS: Tuple[str, ...] = (INVENTORY, SUPPLIERS, FLEET, WAREHOUSE, CUSTOMER)

WELCOME_TITLE = "Welcome to LogiSphere"
WELCOME_SUBTITLE = "A demo Logistics, Supply Chain & Transport Management System"
WELCOME_TIPS = (
    "Use the buttons above to open department dashboards.\n"
    "This demo keeps data in memory. Nothing is saved between runs.\n\n"
    "Quick tips:\n"
    " - Use Inventory to add/update/delete products and view reorder alerts.\n"
    " - Use Supplier to manage suppliers and place orders.\n"
    " - Use Fleet to register vehicles, assign drivers and track maintenance.\n"
    " - Use Warehouse to simulate storage and optimization.\n"
    " - Use Customer to compute shipping costs and track shipments."
)

DEPARTMENT_CONTENT: Dict[str, str] = {
    INVENTORY: (
        "Description: Track stock levels, reorder products, generate alerts.\n\n"
        "Features:\n"
        " - Add/Update/Delete Products\n"
        " - View Stock Levels\n"
        " - Automatic Reorder Alerts\n"
        " - [Button: Add New Product]\n"
        " - [Table: Current Stock]"
    ),
    SUPPLIERS: (
        "Description: Manage suppliers, track orders, and generate reports.\n\n"
        "Features:\n"
        " - Supplier Database (Add/View/Edit)\n"
        " - Order Placement and Status Tracking\n"
        " - Vendor Performance Analytics\n"
        " - [Button: Place New Order]\n"
        " - [Button: View All Suppliers]"
    ),
    FLEET: (
        "Description: Manage delivery vehicles, driver schedules, and maintenance.\n\n"
        "Features:\n"
        " - Vehicle Registration & Tracking (Live Map)\n"
        " - Driver Assignments and Schedules\n"
        " - Maintenance Alerts\n"
        " - [Button: Assign Driver to Vehicle]\n"
        " - [Panel: Vehicle Status Dashboard]"
    ),
    WAREHOUSE: (
        "Description: Simulate warehouse operations: picking, packing, storage.\n\n"
        "Features:\n"
        " - Add/Remove Items in Warehouse\n"
        " - Optimize Space for Storage (Visual Map)\n"
        " - Generate Operational Efficiency Reports\n"
        " - [Button: Check In Item]\n"
        " - [Button: Fulfill Order (Pick/Pack)]"
    ),
    CUSTOMER: (
        "Description: Calculate costs and track shipments.\n\n"
        "Features:\n"
        " - Calculate Total Logistics Costs\n"
        "   - Input Weight, Distance, Mode of Transport\n"
        "   - Generate Cost Breakdown\n"
        "   - Compare Costs\n"
        " - Track Shipments (by ID)\n"
        " - [TextField: Enter Tracking ID]\n"
        " - [Panel: Cost Calculator Form]"
    ),
}


def content_for(department_name: str) -> str:
    """Return the description text for ``department_name`` ("" if unknown)."""
    return DEPARTMENT_CONTENT.get(department_name, "")


def title_for(department_name: str) -> str:
    return f"Welcome to {department_name}"
