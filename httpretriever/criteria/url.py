"""Query-string assembly for request URLs."""

from collections.abc import Iterable

from httpretriever.criteria.models import QueryParameter


QUERY_SEPARATOR = "?"
PARAMETER_SEPARATOR = "&"


def join_query_parameters(query_parameters: Iterable[QueryParameter]) -> str:
    """Join parameters as field=value pairs in insertion order.

    Values are written verbatim; no percent-encoding is applied.

    Args:
        query_parameters: Parameters to join.

    Returns:
        The joined string, empty when there are no parameters.
    """
    return PARAMETER_SEPARATOR.join(
        f"{param.field}={param.value}" for param in query_parameters
    )


def assemble_url(base_url: str, query_parameters: Iterable[QueryParameter]) -> str:
    """Append the query string to a base URL.

    The leading "?" is only written when the base URL does not already
    contain one. When it does, the joined parameters are appended directly,
    so ``http://h/p?a=1`` with ``b=2`` becomes ``http://h/p?a=1b=2``.

    Args:
        base_url: URL as supplied by the caller.
        query_parameters: Parameters to append.

    Returns:
        The assembled URL.
    """
    params = join_query_parameters(query_parameters)
    if not params or QUERY_SEPARATOR in base_url:
        return base_url + params
    return base_url + QUERY_SEPARATOR + params
