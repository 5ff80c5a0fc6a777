# sales_dashboard/models/transaction.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class Transaction(BaseModel):
    """A retail transaction as stored in the transactions collection"""
    id: Optional[str] = Field(None, alias="_id", description="Mongo document ID")
    transaction_id: int = Field(..., alias="transactionID")
    date: datetime
    formatted_date: Optional[str] = Field(None, alias="formattedDate", description="DD-MM-YYYY")

    # Customer
    customer_id: Optional[str] = Field(None, alias="customerID")
    customer_name: Optional[str] = Field(None, alias="customerName")
    phone: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    region: Optional[str] = None
    customer_type: Optional[str] = Field(None, alias="customerType")

    # Product
    product_id: Optional[str] = Field(None, alias="productID")
    product_name: Optional[str] = Field(None, alias="productName")
    brand: Optional[str] = None
    product_category: Optional[str] = Field(None, alias="productCategory")
    tags: List[str] = Field(default_factory=list)

    # Commerce
    quantity: Optional[int] = None
    price_per_unit: Optional[float] = Field(None, alias="pricePerUnit")
    discount_percentage: Optional[float] = Field(0, alias="discountPercentage")
    amount: Optional[float] = None
    final_amount: Optional[float] = Field(None, alias="finalAmount")

    # Fulfillment
    payment_method: Optional[str] = Field(None, alias="paymentMethod")
    status: Optional[str] = None
    delivery_type: Optional[str] = Field(None, alias="deliveryType")
    store_id: Optional[str] = Field(None, alias="storeID")
    store_location: Optional[str] = Field(None, alias="storeLocation")
    employee_id: Optional[str] = Field(None, alias="employeeID")
    employee_name: Optional[str] = Field(None, alias="employeeName")

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_mongo(cls, data: dict):
        """Convert MongoDB document to Pydantic model"""
        converted = data.copy()

        if "_id" in converted:
            converted["_id"] = str(converted["_id"])

        if converted.get("date") is not None:
            converted["formattedDate"] = converted["date"].strftime("%d-%m-%Y")

        converted.pop("__v", None)
        return cls(**converted)

    def to_response(self) -> dict:
        """Serialize with the stored camelCase names"""
        return self.model_dump(by_alias=True, mode="json")
