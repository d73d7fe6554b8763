"""Example plugin and resolvers for examples/hookit.yaml.

Run from the examples directory:

    hookit --config hookit.yaml list
    hookit --config hookit.yaml run routes "['/']"
    hookit --config hookit.yaml run helpers
"""


def add_health_route(routes):
    return [*routes, "/health"]


def add_metrics_route(routes):
    return [*routes, "/metrics"]


async def template_helpers():
    return {"asset": "asset_url", "date": "format_date"}


def register_hooks(register):
    register("routes", add_health_route)
    register("routes", add_metrics_route)
    register("helpers", template_helpers)


def merge_helpers(outcome):
    """Merge helper dicts, prefixing names that more than one plugin defines."""
    merged = {}
    for tagged in outcome.results:
        for key, value in tagged.result.items():
            if key in merged:
                key = f"{tagged.origin}-{key}"
            merged[key] = value
    return merged
