"""Collector host, region and telemetry endpoint derivation."""

DEFAULT_COLLECTOR_HOST = "collector.newrelic.com"
REGION_COLLECTOR_HOST = "collector.{region}.nr-data.net"

TELEMETRY_HOST_TEMPLATES: dict[str, str] = {
    "log": "https://{env}log-api.{region}newrelic.com/log/v1",
}

_REGION_SEPARATOR = "x"
_ENV_SUFFIX = "-collector"


def determine_region(license_key: str | None) -> str | None:
    """Extract the data residency region from a license key.

    The region is the shortest non-empty prefix of the key immediately
    followed by an 'x' (e.g. 'eu01' in 'eu01xx65c6...NRAL'), with any
    trailing 'x' characters removed. Keys without such a prefix belong to
    the default region and yield None.
    """
    if license_key is None:
        return None

    # Only the first line is scanned, and the prefix must be at least one
    # character long, so the search starts at index 1
    first_line = license_key.split("\n", 1)[0]
    index = first_line.find(_REGION_SEPARATOR, 1)
    if index == -1:
        return None

    region = first_line[:index].rstrip(_REGION_SEPARATOR)
    return region or None


def determine_collector_host(
    host: str | None, license_key: str | None
) -> tuple[str, str | None]:
    """Pick the collector host and region prefix.

    Priority order:
    1. Explicit host override, used verbatim without a region
    2. Region-specific collector derived from the license key
    3. The default collector

    Returns:
        Tuple of (collector_host, region_prefix)
    """
    if host:
        return host, None

    region = determine_region(license_key)
    if region is not None:
        return REGION_COLLECTOR_HOST.format(region=region), region

    return DEFAULT_COLLECTOR_HOST, None


def determine_environment(host: str | None) -> str | None:
    """Extract the environment label preceding '-collector' in a host.

    Uses the last '-collector' occurrence; the label must be non-empty.
    'staging-collector.newrelic.com' yields 'staging'.
    """
    if not host:
        return None

    index = host.rfind(_ENV_SUFFIX)
    if index < 1:
        return None
    return host[:index]


def determine_telemetry_hosts(host: str | None, region: str | None) -> dict[str, str]:
    """Build telemetry endpoint URLs for the configured host and region.

    Missing environment or region segments are left out of the URL.
    """
    env = determine_environment(host)
    env_segment = f"{env}-" if env else ""
    region_segment = f"{region}." if region else ""

    return {
        purpose: template.format(env=env_segment, region=region_segment)
        for purpose, template in TELEMETRY_HOST_TEMPLATES.items()
    }
