from pydantic import BaseModel, ConfigDict, Field


# --- Receipts ---

class ItemIn(BaseModel):
    short_description: str = Field("", alias="shortDescription")
    price: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ReceiptIn(BaseModel):
    # Missing fields bind to empty values so the validator can reject them
    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate")
    purchase_time: str = Field("", alias="purchaseTime")
    items: list[ItemIn] | None = None
    total: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# --- Responses ---

class ProcessOut(BaseModel):
    id: str


class PointsOut(BaseModel):
    points: int
