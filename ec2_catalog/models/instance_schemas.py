"""
Schemas for the generated instance type table.
"""
from pydantic import BaseModel, Field


class InstanceSpec(BaseModel):
    """Normalized resources of one EC2 instance type."""
    instance_type: str = Field(..., description="Instance type identifier", min_length=1)
    vcpu: int = Field(0, description="Number of virtual CPUs", ge=0)
    memory_mb: int = Field(0, description="Memory in MiB", ge=0)
    gpu: int = Field(0, description="Number of GPUs", ge=0)
