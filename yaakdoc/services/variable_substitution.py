"""
Variable substitution service for replacing ${[ variable ]} placeholders.

Yaak templates reference variables as ``${[ name ]}``; whitespace inside
the brackets is optional. This service extracts and substitutes those
placeholders in request fields (URL, headers, URL parameters, body text).
"""

import re
from typing import Tuple, List

from ..schemas.resources import HttpRequest
from ..schemas.snapshot import RenderedHttpRequest


# Pattern to match ${[ variable_name ]} placeholders
VARIABLE_PATTERN = re.compile(r'\$\{\[\s*([\w.-]+)\s*\]\}')


def extract_variables(template: str) -> List[str]:
    """
    Extract all variable names from a template string.

    Example:
        >>> extract_variables("${[ host ]}/users/${[user_id]}")
        ['host', 'user_id']
    """
    if not template:
        return []

    return VARIABLE_PATTERN.findall(template)


def render(template: str, variables: dict[str, str]) -> Tuple[str, List[str]]:
    """
    Replace variable placeholders in a template with their values.

    Args:
        template: String containing ${[ variable ]} placeholders
        variables: Dictionary mapping variable names to their values

    Returns:
        Tuple of (rendered string, list of unmatched variable names)

    Example:
        >>> render("Hello ${[ name ]}", {"name": "World"})
        ('Hello World', [])
        >>> render("Hello ${[ name ]}", {})
        ('Hello ${[ name ]}', ['name'])
    """
    if not template:
        return template, []

    unmatched: List[str] = []

    def replace_match(match: re.Match) -> str:
        var_name = match.group(1)
        if var_name in variables:
            return variables[var_name]
        unmatched.append(var_name)
        return match.group(0)  # Keep original placeholder

    result = VARIABLE_PATTERN.sub(replace_match, template)
    return result, unmatched


def render_pairs(
    pairs: list, variables: dict[str, str]
) -> Tuple[List[Tuple[str, str]], List[str]]:
    """
    Render the values of enabled name/value pairs (headers, URL parameters).

    Repeated names are kept as separate entries, in input order.

    Returns:
        Tuple of ([name, rendered value] pairs, list of all unmatched variable names)
    """
    result: List[Tuple[str, str]] = []
    all_unmatched: List[str] = []

    for pair in pairs:
        if not pair.enabled:
            continue
        value, unmatched = render(pair.value, variables)
        result.append((pair.name, value))
        all_unmatched.extend(unmatched)

    return result, all_unmatched


def render_request(
    request: HttpRequest, variables: dict[str, str]
) -> RenderedHttpRequest:
    """
    Render every templated field of an HTTP request.

    Undefined variables are left in place and reported as warnings.
    """
    warnings: list[str] = []

    url, url_unmatched = render(request.url, variables)
    warnings.extend(f"Undefined variable in URL: {v}" for v in url_unmatched)

    headers, headers_unmatched = render_pairs(request.headers, variables)
    warnings.extend(f"Undefined variable in headers: {v}" for v in headers_unmatched)

    params, params_unmatched = render_pairs(request.url_parameters, variables)
    warnings.extend(f"Undefined variable in URL parameters: {v}" for v in params_unmatched)

    body = dict(request.body)
    text = body.get("text")
    if isinstance(text, str):
        body["text"], body_unmatched = render(text, variables)
        warnings.extend(f"Undefined variable in body: {v}" for v in body_unmatched)

    return RenderedHttpRequest(
        id=request.id,
        name=request.name,
        method=request.method,
        url=url,
        headers=headers,
        url_parameters=params,
        body=body,
        warnings=warnings,
    )
