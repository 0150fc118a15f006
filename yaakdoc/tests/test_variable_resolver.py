"""
Tests for the variable resolution service.

Covers workspace/environment layering, the enabled flag, and
property-based checks of the override law.
"""

import pytest
from hypothesis import given, strategies as st, settings

from yaakdoc.schemas.resources import Environment, EnvironmentVariable, Workspace
from yaakdoc.services.variable_resolver import resolve_variables


def _var(name, value, enabled=True) -> EnvironmentVariable:
    return EnvironmentVariable(name=name, value=value, enabled=enabled)


# Strategy for generating variable names
variable_name_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"),
    min_size=1,
    max_size=10,
)

variable_strategy = st.builds(
    EnvironmentVariable,
    name=variable_name_strategy,
    value=st.text(max_size=30),
    enabled=st.booleans(),
)

variables_list_strategy = st.lists(variable_strategy, max_size=8, unique_by=lambda v: v.name)


class TestResolveVariables:
    def test_workspace_overridden_by_environment(self):
        """
        W: API_KEY=w1, HOST=w-host; E: API_KEY=e1, HOST=e-host (disabled).
        HOST falls back to the workspace value.
        """
        workspace = Workspace(id="wk_1", variables=[_var("API_KEY", "w1"), _var("HOST", "w-host")])
        environment = Environment(
            id="ev_1",
            variables=[_var("API_KEY", "e1"), _var("HOST", "e-host", enabled=False)],
        )

        assert resolve_variables(workspace, environment) == {"API_KEY": "e1", "HOST": "w-host"}

    def test_no_workspace_returns_empty(self):
        environment = Environment(id="ev_1", variables=[_var("API_KEY", "e1")])
        assert resolve_variables(None, environment) == {}

    def test_no_environment_uses_workspace_only(self):
        workspace = Workspace(id="wk_1", variables=[_var("HOST", "w-host"), _var("OFF", "x", False)])
        assert resolve_variables(workspace, None) == {"HOST": "w-host"}

    def test_insertion_order_is_resolution_order(self):
        workspace = Workspace(id="wk_1", variables=[_var("b", "1"), _var("a", "2")])
        environment = Environment(id="ev_1", variables=[_var("c", "3"), _var("b", "4")])

        result = resolve_variables(workspace, environment)

        assert list(result.items()) == [("b", "4"), ("a", "2"), ("c", "3")]

    def test_duplicate_names_last_enabled_wins(self):
        workspace = Workspace(
            id="wk_1",
            variables=[_var("HOST", "first"), _var("HOST", "second"), _var("HOST", "third", False)],
        )
        assert resolve_variables(workspace) == {"HOST": "second"}

    def test_disabled_only_variable_is_absent(self):
        workspace = Workspace(id="wk_1", variables=[_var("SECRET", "w", enabled=False)])
        environment = Environment(id="ev_1", variables=[_var("SECRET", "e", enabled=False)])
        assert "SECRET" not in resolve_variables(workspace, environment)

    def test_missing_enabled_flag_means_disabled(self):
        workspace = Workspace.model_validate(
            {"id": "wk_1", "variables": [{"name": "HOST", "value": "h"}]}
        )
        assert resolve_variables(workspace) == {}

    def test_inputs_are_not_mutated(self):
        variables = [_var("HOST", "w-host")]
        workspace = Workspace(id="wk_1", variables=variables)
        result = resolve_variables(workspace)
        result["HOST"] = "changed"
        assert workspace.variables[0].value == "w-host"


class TestResolutionProperties:
    @given(ws_vars=variables_list_strategy, env_vars=variables_list_strategy)
    @settings(max_examples=100)
    def test_environment_value_wins_for_shared_enabled_names(self, ws_vars, env_vars):
        """
        Property: A name enabled in the environment always resolves to the
        environment's value.
        """
        result = resolve_variables(
            Workspace(id="wk_1", variables=ws_vars),
            Environment(id="ev_1", variables=env_vars),
        )
        for variable in env_vars:
            if variable.enabled:
                assert result[variable.name] == variable.value

    @given(ws_vars=variables_list_strategy, env_vars=variables_list_strategy)
    @settings(max_examples=100)
    def test_only_enabled_names_appear(self, ws_vars, env_vars):
        """
        Property: The resolved names are exactly the enabled names of both scopes.
        """
        result = resolve_variables(
            Workspace(id="wk_1", variables=ws_vars),
            Environment(id="ev_1", variables=env_vars),
        )
        enabled_names = {v.name for v in ws_vars + env_vars if v.enabled}
        assert set(result) == enabled_names

    @given(ws_vars=variables_list_strategy, env_vars=variables_list_strategy)
    @settings(max_examples=100)
    def test_workspace_value_kept_when_environment_does_not_enable_name(self, ws_vars, env_vars):
        result = resolve_variables(
            Workspace(id="wk_1", variables=ws_vars),
            Environment(id="ev_1", variables=env_vars),
        )
        env_enabled = {v.name for v in env_vars if v.enabled}
        for variable in ws_vars:
            if variable.enabled and variable.name not in env_enabled:
                assert result[variable.name] == variable.value

    @given(env_vars=variables_list_strategy)
    @settings(max_examples=50)
    def test_environment_ignored_without_workspace(self, env_vars):
        assert resolve_variables(None, Environment(id="ev_1", variables=env_vars)) == {}


@pytest.mark.parametrize("enabled", [True, False])
def test_single_scope_enabled_flag(enabled):
    workspace = Workspace(id="wk_1", variables=[_var("HOST", "h", enabled)])
    assert ("HOST" in resolve_variables(workspace)) is enabled
