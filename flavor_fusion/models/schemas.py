"""
Request payload schemas

Documents are stored as sent by the front-end, so every schema keeps
unknown fields (extra='allow') and only pins down the fields the
handlers compute with.
"""

from typing import Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field


class FoodOrderCreate(BaseModel):
    model_config = ConfigDict(extra='allow')

    food_id: str = Field(..., description="FoodItem ObjectId as string")
    ordered: int = Field(..., ge=1, description="Units ordered")
    buyer_name: str = Field(..., description="Name of the buyer")
    buyer_email: str = Field(..., description="Email of the buyer")


class FoodItemCreate(BaseModel):
    model_config = ConfigDict(extra='allow')

    food_name: str = Field(..., description="Item name")
    food_category: str = Field(..., description="Category like 'Salad', 'Drinks'")
    quantity: int = Field(..., ge=0, description="Units in stock")
    price: float = Field(..., ge=0, description="Unit price")
    order: int = Field(0, ge=0, description="Units sold so far")
    added_by_name: Optional[str] = None
    added_by_email: Optional[str] = None


class FoodItemUpdate(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: str = Field(..., description="FoodItem ObjectId as string")
    food_name: Optional[str] = None
    food_image: Optional[str] = None
    food_category: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    origin: Optional[str] = None
    ingredients: Optional[Union[List[str], str]] = None
