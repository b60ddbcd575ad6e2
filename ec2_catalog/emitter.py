"""
Renders the instance type table as Go source for the cluster-autoscaler AWS provider.
"""
import json
import logging
import os
import tempfile
from typing import Iterable, Optional

from ec2_catalog.models.errors import TableEmitError
from ec2_catalog.models.instance_schemas import InstanceSpec
from ec2_catalog.utils.config import get_output_path, get_package_name

logger = logging.getLogger(__name__)

LICENSE_HEADER = """/*
Copyright The Kubernetes Authors.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
*/
"""

GENERATED_MARKER = "// This file was generated by go generate; DO NOT EDIT"

STRUCT_DECLARATION = """type instanceType struct {
\tInstanceType string
\tVCPU         int64
\tMemoryMb     int64
\tGPU          int64
}
"""

ENTRY_TEMPLATE = """
\t{key}: {{
\t\tInstanceType: {key},
\t\tVCPU:         {vcpu},
\t\tMemoryMb:     {memory_mb},
\t\tGPU:          {gpu},
\t}},"""


def go_string(value: str) -> str:
    # raw UTF-8 instead of \u escapes: Go rejects escaped surrogate halves.
    # A BOM is only allowed at the start of a Go file.
    return json.dumps(value, ensure_ascii=False).replace("\ufeff", "\\ufeff")


def render_instance_types(specs: Iterable[InstanceSpec], package_name: str = "aws") -> str:
    """
    Render the Go source declaring the InstanceTypes map.

    Entries are written in order of instance type so the output only depends
    on the table's content.

    Args:
        specs: Instance specifications to declare
        package_name: Go package of the generated file

    Returns:
        str: Complete file content
    """
    entries = "".join(
        ENTRY_TEMPLATE.format(key=go_string(spec.instance_type), vcpu=spec.vcpu,
                              memory_mb=spec.memory_mb, gpu=spec.gpu)
        for spec in sorted(specs, key=lambda s: s.instance_type)
    )
    return (
        f"{LICENSE_HEADER}\n"
        f"{GENERATED_MARKER}\n\n"
        f"package {package_name}\n\n"
        f"{STRUCT_DECLARATION}\n"
        "// InstanceTypes is a map of ec2 resources\n"
        f"var InstanceTypes = map[string]*instanceType{{{entries}\n"
        "}\n"
    )


class GoTableEmitter:
    def __init__(self, output_path: Optional[str] = None, package_name: Optional[str] = None):
        self.output_path = output_path or get_output_path()
        self.package_name = package_name or get_package_name()

    def emit(self, specs: Iterable[InstanceSpec]) -> str:
        """
        Write the generated file, replacing any previous version.

        The content goes to a temporary file next to the output first and is
        renamed over the output only once complete.

        Returns:
            str: Path of the written file

        Raises:
            TableEmitError: If the file cannot be rendered or written
        """
        specs = list(specs)
        try:
            content = render_instance_types(specs, package_name=self.package_name)
        except (TypeError, ValueError) as e:
            raise TableEmitError(path=self.output_path, message=f"rendering failed: {e}") from e

        directory = os.path.dirname(os.path.abspath(self.output_path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", newline="\n", dir=directory,
                                             prefix=".ec2_instance_types.", suffix=".tmp",
                                             delete=False) as tmp:
                tmp_path = tmp.name
                tmp.write(content)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.output_path)
        except (OSError, UnicodeError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise TableEmitError(path=self.output_path, message=str(e)) from e

        logger.info(f"Wrote {len(specs)} instance types to {self.output_path}")
        return self.output_path
