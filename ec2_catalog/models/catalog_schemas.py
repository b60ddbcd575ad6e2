"""
Schemas for the AWS pricing catalog offer file.

Only the attributes needed to describe an instance type are modelled; every
other key in the offer file is ignored.
"""
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductAttributes(BaseModel):
    """Attributes of a single SKU in the pricing catalog."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    instance_type: Optional[str] = Field(None, alias="instanceType", description="Instance type identifier, empty for non-compute SKUs")
    vcpu: Optional[str] = Field(None, description="Number of virtual CPUs as text")
    memory: Optional[str] = Field(None, description="Memory size as text, e.g. '16 GiB' or 'NA'")
    gpu: Optional[str] = Field(None, description="Number of GPUs as text")


class ProductRecord(BaseModel):
    """One priceable line item of the catalog."""
    attributes: ProductAttributes = Field(default_factory=ProductAttributes)


class CatalogDocument(BaseModel):
    """The per-region offer file returned by the pricing endpoint."""
    products: Dict[str, ProductRecord]
