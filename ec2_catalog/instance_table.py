"""
Accumulates instance type specifications from the pricing catalogs of many regions.
"""
from typing import Dict, Iterator, List

from ec2_catalog.models.catalog_schemas import CatalogDocument, ProductAttributes
from ec2_catalog.models.instance_schemas import InstanceSpec
from ec2_catalog.utils.transform_data_types import has_memory, parse_count, parse_memory_mib


class InstanceTypeTable:
    """
    Mapping of instance type to InstanceSpec, built up one record at a time.

    A record only overwrites the fields it carries; fields it lacks keep the
    value set by an earlier record, so the table holds the union of all
    records with the most recent value winning.
    """

    def __init__(self):
        self._specs: Dict[str, InstanceSpec] = {}

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, instance_type: str) -> bool:
        return instance_type in self._specs

    def __getitem__(self, instance_type: str) -> InstanceSpec:
        return self._specs[instance_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def merge_record(self, attributes: ProductAttributes) -> bool:
        """
        Merge the attributes of one SKU.

        Returns:
            bool: False if the SKU is not an instance type and was skipped

        Raises:
            CatalogParseError: If memory, vcpu or gpu cannot be parsed
        """
        instance_type = attributes.instance_type
        if not instance_type:
            return False

        spec = self._specs.get(instance_type)
        if spec is None:
            spec = InstanceSpec(instance_type=instance_type)
            self._specs[instance_type] = spec

        if has_memory(attributes.memory):
            spec.memory_mb = parse_memory_mib(attributes.memory, instance_type=instance_type)
        if attributes.vcpu:
            spec.vcpu = parse_count(attributes.vcpu, field="vcpu", instance_type=instance_type)
        if attributes.gpu:
            spec.gpu = parse_count(attributes.gpu, field="gpu", instance_type=instance_type)
        return True

    def merge_document(self, document: CatalogDocument) -> int:
        """
        Merge every product of a region's catalog.

        Returns:
            int: Number of products that described an instance type
        """
        merged = 0
        for product in document.products.values():
            if self.merge_record(product.attributes):
                merged += 1
        return merged

    def sorted_specs(self) -> List[InstanceSpec]:
        return [self._specs[key] for key in sorted(self._specs)]
