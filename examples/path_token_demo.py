# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Path/Token demo: per-input checks followed by a cross-field check.

"Path" is mandatory, cannot be null and must name an existing file.
"Token" is optional and may be null. When both are supplied, the final
validator makes sure the file contains the token.

Run with:
    python examples/path_token_demo.py
"""

import os
import tempfile
from pathlib import Path

from inputspec import VALID, FieldSpecification, Invalid, SpecificationSet, format_check_failure


def path_exists(path):
    if Path(path).exists():
        return VALID
    return Invalid(f'The file which path is "{path}" does not exist.')


def token_in_file(values):
    data = Path(values["Path"]).read_text(encoding="utf-8")
    token = values.get("Token")
    if token is not None and token not in data:
        return [f"The file {values['Path']} exists, but it does not contain the token <{token}> !"]
    return []


def build_specifications() -> SpecificationSet:
    specs = SpecificationSet()
    specs.add_field(FieldSpecification("Path", nullable=False, validator=path_exists))
    specs.add_field(FieldSpecification("Token").as_optional().as_nullable())
    specs.set_final_validator(token_in_file)
    return specs


def run(specs: SpecificationSet, values) -> None:
    print(f"\nValues: {values}")
    result = specs.check(values)
    if result:
        print("  The set of inputs' values is valid")
    else:
        print("  " + format_check_failure(result).replace("\n", "\n  "))


def main():
    specs = build_specifications()

    print("=" * 70)
    print("Specifications")
    print("=" * 70)
    for name, summary in specs.summary().items():
        print(f"  {name} => {summary}")

    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
        f.write("Port = 8080\n")
        temp_path = f.name

    try:
        run(specs, {"Path": "/nonexistent/file.txt", "Token": "Port"})
        run(specs, {"Path": temp_path, "Token": "Port"})
        run(specs, {"Path": temp_path, "Token": "Host"})
        run(specs, {"Path": temp_path})
    finally:
        os.unlink(temp_path)


if __name__ == "__main__":
    main()
