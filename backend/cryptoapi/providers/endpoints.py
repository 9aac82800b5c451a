"""
Endpoint descriptors

An Endpoint is the immutable description of one provider URL: a path
template, constant query pairs, required query parameters and optional
boolean switches. Call sites only fill in values; encoding and ordering
are handled here.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import quote

# Characters encodeURIComponent leaves untouched on top of quote()'s defaults
_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str, safe: str = "") -> str:
    """Percent-encode a single path segment or query value"""
    return quote(str(value), safe=_COMPONENT_SAFE + safe)


def join_values(values: Union[str, Iterable[str]]) -> str:
    """
    Comma-join a list parameter. A plain string is passed through as is.

    Raises:
        ValueError: nothing to join
    """
    if isinstance(values, str):
        joined = values
    else:
        joined = ",".join(str(value) for value in values)
    if not joined:
        raise ValueError("At least one value is required")
    return joined


@dataclass(frozen=True)
class Endpoint:
    path: str
    params: Tuple[str, ...] = ()  # required query params, in order
    fixed: Tuple[Tuple[str, str], ...] = ()  # constant pairs, always first
    flags: Tuple[str, ...] = ()  # optional switches sent as name=true
    joined: Tuple[str, ...] = ()  # comma-joined list params, commas stay literal

    def url(
        self,
        base_url: str,
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, str]] = None,
        enabled: Iterable[str] = (),
    ) -> str:
        """
        Build the absolute URL for this endpoint

        Args:
            base_url: Provider base URL (no trailing slash needed)
            path_params: Values for the {placeholders} of the path template
            query: Values for the required query params
            enabled: Names of the switches to send

        Raises:
            KeyError: a path placeholder has no value
            ValueError: a required query param is absent or None, or a switch is unknown
        """
        segments: Dict[str, str] = {
            name: encode_component(value) for name, value in (path_params or {}).items()
        }
        url = base_url.rstrip("/") + self.path.format(**segments)

        query = query or {}
        pairs = [f"{name}={value}" for name, value in self.fixed]
        for name in self.params:
            if query.get(name) is None:
                raise ValueError(f"Missing required query parameter '{name}' for {self.path}")
            safe = "," if name in self.joined else ""
            pairs.append(f"{name}={encode_component(query[name], safe=safe)}")

        enabled = set(enabled)
        unknown = enabled - set(self.flags)
        if unknown:
            raise ValueError(f"Unknown flags for {self.path}: {sorted(unknown)}")
        pairs.extend(f"{flag}=true" for flag in self.flags if flag in enabled)

        if pairs:
            url += "?" + "&".join(pairs)
        return url
