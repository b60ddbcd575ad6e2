'''
This module contains functions to transform text attributes of the pricing catalog to the numeric types of the generated table.
'''
import math
import re

from ec2_catalog.models.errors import CatalogParseError

MEMORY_NOT_APPLICABLE = "NA"
MIB_PER_GIB = 1024
# the generated table declares every field as int64
INT64_MAX = 2 ** 63 - 1

_NON_DECIMAL_CHARS = re.compile(r'[^0-9.]+')
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def parse_memory_mib(memory, instance_type=None):
    '''
    Convert a catalog memory string such as "16 GiB" or "1,952 GiB" to MiB.

    Every character that is not a digit or a decimal point is dropped before parsing,
    and the result is truncated towards zero.
    '''
    cleaned = _NON_DECIMAL_CHARS.sub('', memory)
    try:
        gib = float(cleaned)
    except ValueError as e:
        raise CatalogParseError(field='memory', value=memory, instance_type=instance_type) from e
    mib = gib * MIB_PER_GIB
    if not math.isfinite(mib) or mib > INT64_MAX:
        raise CatalogParseError(field='memory', value=memory, instance_type=instance_type)
    return int(mib)


def parse_count(value, field='vcpu', instance_type=None):
    '''
    Parse a base-10 count such as the vcpu or gpu attribute. A leading "+" is accepted.
    '''
    if not _UNSIGNED_INT.fullmatch(value):
        raise CatalogParseError(field=field, value=value, instance_type=instance_type)
    try:
        count = int(value, 10)
    except ValueError as e:
        # digit strings beyond the interpreter's int conversion limit
        raise CatalogParseError(field=field, value=value, instance_type=instance_type) from e
    if count > INT64_MAX:
        raise CatalogParseError(field=field, value=value, instance_type=instance_type)
    return count


def has_memory(memory):
    # "NA" marks SKUs without a fixed memory size
    return bool(memory) and memory != MEMORY_NOT_APPLICABLE
