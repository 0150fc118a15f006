"""
Variable resolution service.

Layers an environment's variables over a workspace's variables into one
ordered name -> value mapping.
"""

import logging

from ..schemas.resources import Environment, EnvironmentVariable, Workspace

logger = logging.getLogger(__name__)


def apply_variables(
    variable_map: dict[str, str],
    variables: list[EnvironmentVariable],
) -> None:
    """Write every enabled variable into the map, overwriting by name."""
    for variable in variables:
        if variable.enabled:
            variable_map[variable.name] = variable.value


def resolve_variables(
    workspace: Workspace | None,
    environment: Environment | None = None,
) -> dict[str, str]:
    """
    Resolve the effective variables for a workspace/environment pair.

    Enabled workspace variables are applied first, then enabled environment
    variables, so the environment wins on a name collision. Disabled
    variables are skipped in both scopes and never overwrite anything.

    Args:
        workspace: Active workspace, or None.
        environment: Active environment, or None.

    Returns:
        Ordered mapping of variable name to value. Empty when there is no
        workspace, even if an environment is given.

    Example:
        >>> ws = Workspace(id="wk_1", variables=[
        ...     EnvironmentVariable(name="host", value="a", enabled=True)])
        >>> env = Environment(id="ev_1", variables=[
        ...     EnvironmentVariable(name="host", value="b", enabled=True)])
        >>> resolve_variables(ws, env)
        {'host': 'b'}
    """
    variable_map: dict[str, str] = {}

    if workspace is None:
        return variable_map

    apply_variables(variable_map, workspace.variables)

    if environment is not None:
        apply_variables(variable_map, environment.variables)

    logger.debug(
        "Resolved %d variables for workspace %s (environment %s)",
        len(variable_map),
        workspace.id,
        environment.id if environment is not None else None,
    )
    return variable_map
