"""Pydantic models for fabric purchase orders."""

from typing import Optional, Union

from pydantic import BaseModel


class FabricOrder(BaseModel):
    id: str
    model_name: str
    order_no: str
    order_deadline: str
    season: str
    quality: str
    usage_area: str
    color: str
    fabric_code: str
    order_quantity: int
    weight_gsm: Optional[int] = None
    pp_status: str = ""
    requirement_kg: Union[int, float]  # whole kilograms stay int
    supplier: str
    price: Optional[Union[int, float]] = None
    sap_order_code: str = ""
    order_created_at: str = ""
    sas_deadline: str = ""
    remaining_time: str = ""
    lab_ok: str = ""
    cad_ok: str = ""
    variant_ok: str = ""
    fabric_test: str = ""
    notes: str = ""


class OrderStats(BaseModel):
    total_orders: int
    total_requirement_kg: float
    unique_fabrics: int
    average_price: Optional[float] = None
