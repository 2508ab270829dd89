"""Example layerconf field table.

Each row declares one setting. Defaults are text; the environment key
falls back to the field name when "env" is omitted.

Usage:
    python scripts/run_layerconf.py scripts/example_fields.py
    python scripts/run_layerconf.py scripts/example_fields.py --mode yaml-env
    python scripts/run_layerconf.py scripts/example_fields.py --example config.yml.example
"""

FIELDS = [
    # ========================================================================
    # SERVICE
    # ========================================================================
    {"name": "ServiceName", "kind": "text", "default": "hello", "env": "SERVICE_NAME", "required": True},
    {"name": "Port", "kind": "integer", "default": "8080", "env": "SERVICE_PORT"},
    {"name": "Debug", "kind": "boolean", "default": "false", "env": "SERVICE_DEBUG"},

    # ========================================================================
    # LIMITS
    # ========================================================================
    {"name": "RequestTimeout", "kind": "float", "default": "2.5", "env": "REQUEST_TIMEOUT"},
    {"name": "MaxWorkers", "kind": "integer", "default": "10", "env": "MAX_WORKERS"},

    # ========================================================================
    # CREDENTIALS (masked in listings)
    # ========================================================================
    {"name": "UPSTREAM_API_KEY", "kind": "text", "default": ""},
]

DESCRIPTIONS = {
    "ServiceName": "Name reported in logs and health checks",
    "Port": "TCP port the service listens on",
    "Debug": "Enable verbose diagnostics",
    "RequestTimeout": "Upstream request timeout in seconds",
    "MaxWorkers": "Size of the worker pool",
    "UPSTREAM_API_KEY": "Credential for the upstream API",
}
