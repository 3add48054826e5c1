import unittest

import pytest

from chainbind import BindingError, Container


class Foo:
    def __init__(self, *args):
        self.args = args


class TestBindArguments(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container()

    def test_bind_raises_type_error_when_name_is_not_a_string(self):
        with pytest.raises(TypeError):
            self.cont.bind(42, {})

    def test_bind_raises_value_error_when_name_is_empty(self):
        with pytest.raises(ValueError, match="non-empty"):
            self.cont.bind("", Foo)

    def test_bind_raises_type_error_when_target_is_none(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", None)

    def test_bind_raises_type_error_when_dependencies_not_a_mapping(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, dependencies=42)

    def test_bind_raises_type_error_when_dependencies_map_non_strings(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, dependencies={"bar": 1})

    def test_bind_raises_type_error_when_params_not_a_sequence(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, params=42)

    def test_bind_raises_type_error_when_params_is_a_string(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, params="ab")

    def test_bind_raises_type_error_when_lifetime_unknown(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, lifetime=42)

        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, lifetime="forever")

    def test_failed_bind_leaves_name_unbound(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", Foo, lifetime="forever")

        assert "test" not in self.cont


class TestValueTargetConfiguration(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container()

    def test_bind_raises_binding_error_for_dependencies_on_value(self):
        with pytest.raises(BindingError):
            self.cont.bind("test", {}, dependencies={"foo": "bar"})

    def test_bind_raises_binding_error_for_params_on_value(self):
        with pytest.raises(BindingError):
            self.cont.bind("test", {}, params=["a"])

    def test_bind_raises_binding_error_for_lifetime_on_value(self):
        with pytest.raises(BindingError):
            self.cont.bind("test", {}, lifetime="singleton")

    def test_binding_error_is_not_a_type_error(self):
        assert not issubclass(BindingError, TypeError)

    def test_binding_error_has_default_message(self):
        assert str(BindingError()) == "Invalid binding configuration encountered"

    def test_type_checks_run_before_configuration_checks(self):
        with pytest.raises(TypeError):
            self.cont.bind("test", {}, lifetime="forever")

    def test_rejected_value_binding_keeps_previous_binding(self):
        self.cont.bind("test", 1)

        with pytest.raises(BindingError):
            self.cont.bind("test", 2, params=[1])

        assert self.cont.resolve("test") == 1


class TestBindAllArguments(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container()

    def test_bind_all_raises_type_error_when_base_not_a_class(self):
        with pytest.raises(TypeError):
            self.cont.bind_all("Foo", {"a": "a"})

        with pytest.raises(TypeError):
            self.cont.bind_all(lambda: None, {"a": "a"})

    def test_bind_all_raises_type_error_when_dependencies_none(self):
        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, None)

    def test_bind_all_raises_type_error_when_dependencies_not_a_mapping(self):
        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, 42)

        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, "abc")

    def test_bind_all_raises_type_error_when_dependencies_a_list(self):
        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, [("a", "a")])

    def test_bind_all_raises_type_error_when_dependencies_empty(self):
        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, {})

    def test_rejected_bind_all_leaves_chains_untouched(self):
        self.cont.bind("foo", Foo)

        with pytest.raises(TypeError):
            self.cont.bind_all(Foo, {})

        assert self.cont.chain("foo") == ()


class TestResolveArguments(unittest.TestCase):
    def test_resolve_raises_type_error_when_name_not_a_string(self):
        with pytest.raises(TypeError):
            Container().resolve(42)

    def test_chain_raises_type_error_when_name_not_a_string(self):
        with pytest.raises(TypeError):
            Container().chain(None)
