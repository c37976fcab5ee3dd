# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Protocol demo: structured error identifiers and a final safety rule.

Error identifiers are opaque to inputspec, so this demo returns small dicts
instead of strings and renders them itself.

Run with:
    python examples/protocol_demo.py
"""

import os
import re
import tempfile
from pathlib import Path

from inputspec import VALID, FieldSpecification, Invalid, SpecificationSet

_PROTOCOL = re.compile(r"^(simple|secure|paranoid)$", re.IGNORECASE)


def path_exists(path):
    if Path(path).exists():
        return VALID
    return Invalid({"code": "ENOENT", "path": path})


def known_protocol(protocol):
    if isinstance(protocol, str) and _PROTOCOL.match(protocol):
        return VALID
    return Invalid({"code": "EPROTO", "protocol": protocol})


def build_specifications(secret_path: str) -> SpecificationSet:
    def protocol_is_safe(values):
        if values["path"] == secret_path and values["protocol"].lower() == "simple":
            return [{"code": "EUNSAFE", "message": "The protocol <simple> is not safe for this kind of data!"}]
        return []

    return SpecificationSet(
        [
            FieldSpecification("path", nullable=False, validator=path_exists),
            FieldSpecification("force", mandatory=False),
            FieldSpecification("protocol").as_not_nullable().with_validator(known_protocol),
        ],
        final_validator=protocol_is_safe,
    )


def report(title: str, specs: SpecificationSet, values) -> None:
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)
    result = specs.check(values)
    if result.valid:
        print("  The configuration is OK")
        return
    print("  The configuration is not OK")
    for name, error in result.field_errors.items():
        print(f"    input {name}: {error}")
    for error in result.final_errors:
        print(f"    final: {error['code']} - {error['message']}")


def main():
    with tempfile.NamedTemporaryFile(delete=False) as f:
        secret_path = f.name

    try:
        specs = build_specifications(secret_path)
        report("TEST 1: good configuration", specs, {"path": __file__, "force": 1, "protocol": "simple"})
        report("TEST 2: unknown protocol, force omitted", specs, {"path": __file__, "protocol": "very strange"})
        report("TEST 3: missing inputs", specs, {"force": None})
        report("TEST 4: unsafe combination", specs, {"path": secret_path, "protocol": "simple"})
    finally:
        os.unlink(secret_path)


if __name__ == "__main__":
    main()
