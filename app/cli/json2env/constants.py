"""
Constants for flattening JSON documents into environment variables.

This module defines the default configuration used by the flattener when
turning nested JSON structures into flat KEY=VALUE assignments.

Usage Patterns:
    - Nested objects: db.host → db__host
    - Arrays of scalars: ports: [80, 443] → ports="80,443"
    - Enumerated arrays: ports[0] → ports__0
    - Arrays holding objects are always enumerated: hosts[0].name → hosts__0__name

Example:
    Original nested structure:
    {
        "db": {
            "host": "localhost",
            "port": 5432
        },
        "ports": [80, 443],
        "replicas": [
            {"name": "a"},
            {"name": "b"}
        ]
    }

    Flattened assignments:
    db__host="localhost"
    db__port=5432
    ports="80,443"
    replicas__0__name="a"
    replicas__1__name="b"
"""

# Separator placed between a parent key and a nested field name or array index
# Example: {"db": {"host": "localhost"}} → "db__host"
KEY_SEPARATOR = "__"

# Separator placed between elements of a collapsed array of scalars
# Example: {"ports": [80, 443]} → ports="80,443"
ARRAY_SEPARATOR = ","

# Emit one variable per array element instead of a single joined string
ENUMERATE_ARRAY = False

# Characters removed from each element when an array is collapsed
ARRAY_ITEM_STRIP_CHARS = '\\"'

# Literal used for JSON null
NULL_LITERAL = "null"
