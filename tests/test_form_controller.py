"""Tests for FormController field state, handlers, accessors and bindings."""

from types import SimpleNamespace

import pytest

from formstate import (
    FieldEvent,
    FormConfig,
    FormController,
    SchemaError,
    UnknownFieldError,
)


def native_event(name, value=None):
    """Event shaped like event.target.name / event.target.value."""
    return SimpleNamespace(target=SimpleNamespace(name=name, value=value))


class TestInitialState:
    """Test the state of a freshly built controller."""

    def test_fields_equal_defaults(self, form, defaults):
        assert dict(form.field_states.fields) == defaults

    def test_all_flags_false(self, form, defaults):
        states = form.field_states
        for name in defaults:
            assert states.is_dirty[name] is False
            assert states.is_touched[name] is False
            assert states.is_blurred[name] is False

    def test_status_idle(self, form):
        submit = form.submit_states
        assert submit.status.value == "idle"
        assert not (submit.is_loading or submit.is_success or submit.is_error)
        assert submit.error is None

    def test_invalid_schema_rejected(self, recorder):
        with pytest.raises(SchemaError):
            FormController({}, recorder)


class TestFieldHandlers:
    """Test handle_change, handle_focus and handle_blur."""

    def test_change_sets_value_and_dirty(self, form):
        form.field_handlers.handle_change(FieldEvent("email", "a@b.c"))
        states = form.field_states
        assert states.fields["email"] == "a@b.c"
        assert states.is_dirty["email"] is True
        assert states.is_dirty["name"] is False

    def test_second_change_keeps_dirty_map(self, form):
        """Dirty is set once; later changes only update the value."""
        form.handle_change(FieldEvent("email", "a"))
        dirty_before = form.field_states.is_dirty
        form.handle_change(FieldEvent("email", "ab"))
        assert form.field_states.is_dirty is dirty_before
        assert form.field_states.fields["email"] == "ab"

    def test_focus_sets_touched(self, form):
        form.field_handlers.handle_focus(FieldEvent("name"))
        assert form.field_states.is_touched["name"] is True
        assert form.field_states.is_blurred["name"] is False

    def test_blur_sets_blurred(self, form):
        form.field_handlers.handle_blur(FieldEvent("name"))
        assert form.field_states.is_blurred["name"] is True
        assert form.field_states.is_touched["name"] is False

    def test_native_event_shape(self, form):
        """Objects with target.name/target.value are accepted."""
        form.handle_change(native_event("age", 30))
        form.handle_focus(native_event("age"))
        form.handle_blur(native_event("age"))
        states = form.field_states
        assert states.fields["age"] == 30
        assert states.is_dirty["age"] and states.is_touched["age"] and states.is_blurred["age"]

    def test_unknown_field_raises(self, form):
        with pytest.raises(UnknownFieldError):
            form.handle_change(FieldEvent("zzz", "x"))
        with pytest.raises(UnknownFieldError):
            form.handle_focus(FieldEvent("zzz"))

    def test_change_without_value_raises(self, form):
        with pytest.raises(TypeError):
            form.handle_change(FieldEvent("email"))

    def test_event_without_name_raises(self, form):
        with pytest.raises(TypeError):
            form.handle_blur(object())

    def test_handlers_are_stable(self, form):
        """The handler snapshot holds the same objects on every read."""
        assert form.field_handlers is form.field_handlers
        assert form.field_handlers.handle_change is form.field_handlers.handle_change


class TestControllers:
    """Test set_one, get_one, set_many and get_many."""

    def test_set_one_without_dirty(self, form):
        form.controllers.set_one("name", "Ada", False)
        assert form.controllers.get_one("name") == "Ada"
        assert form.field_states.is_dirty["name"] is False

    def test_set_one_with_dirty(self, form):
        form.controllers.set_one("name", "Ada", True)
        assert form.field_states.is_dirty["name"] is True

    def test_set_many_with_dirty(self, form, notifications):
        """Both fields change and become dirty in one transition."""
        form.controllers.set_many({"name": "Ada", "age": 36}, make_dirty=True)
        states = form.field_states
        assert states.fields["name"] == "Ada"
        assert states.fields["age"] == 36
        assert states.is_dirty["name"] and states.is_dirty["age"]
        assert states.fields["email"] == ""
        assert states.is_dirty["email"] is False
        assert len(notifications) == 1

    def test_set_many_keeps_existing_dirty(self, form):
        form.set_one("name", "x", make_dirty=True)
        form.set_many({"name": "y", "email": "e"}, make_dirty=True)
        assert form.field_states.is_dirty["name"] is True
        assert form.field_states.is_dirty["email"] is True

    def test_set_many_unknown_raises(self, form):
        with pytest.raises(UnknownFieldError):
            form.set_many({"zzz": 1}, make_dirty=True)
        assert not any(form.field_states.is_dirty.values())

    def test_get_many_exact_subset(self, form):
        form.set_many({"name": "Ada", "email": "ada@example.com"})
        assert form.controllers.get_many("name", "email") == {
            "name": "Ada",
            "email": "ada@example.com",
        }

    def test_get_many_ignores_unknown(self, form):
        assert form.get_many("age", "zzz") == {"age": 18}

    def test_get_one_unknown_raises(self, form):
        with pytest.raises(UnknownFieldError):
            form.controllers.get_one("zzz")


class TestReset:
    """Test reset()."""

    def test_reset_merges_overrides(self, form, defaults):
        form.set_many({"name": "Ada", "age": 36}, make_dirty=True)
        form.reset({"email": "x@y.z"})
        assert dict(form.field_states.fields) == {**defaults, "email": "x@y.z"}

    def test_reset_keeps_flags_by_default(self, form):
        form.handle_change(FieldEvent("name", "Ada"))
        form.handle_focus(FieldEvent("name"))
        form.reset()
        assert form.field_states.is_dirty["name"] is True
        assert form.field_states.is_touched["name"] is True

    def test_reset_clear_flags_argument(self, form):
        form.handle_change(FieldEvent("name", "Ada"))
        form.reset(clear_flags=True)
        assert form.field_states.is_dirty["name"] is False

    def test_reset_clears_flags_from_config(self, defaults, recorder):
        form = FormController(defaults, recorder, FormConfig(reset_clears_flags=True))
        form.handle_blur(FieldEvent("age"))
        form.reset()
        assert form.field_states.is_blurred["age"] is False

    def test_explicit_argument_overrides_config(self, defaults, recorder):
        form = FormController(defaults, recorder, FormConfig(reset_clears_flags=True))
        form.handle_blur(FieldEvent("age"))
        form.reset(clear_flags=False)
        assert form.field_states.is_blurred["age"] is True

    def test_reset_unknown_override_raises(self, form):
        with pytest.raises(UnknownFieldError):
            form.reset({"zzz": "x"})


class TestControl:
    """Test control() bindings."""

    def test_binding_fields(self, form):
        binding = form.control("age")
        assert binding.name == "age"
        assert binding.value == 18
        assert binding.on_change is form.field_handlers.handle_change
        assert binding.on_blur is form.field_handlers.handle_blur
        assert binding.on_focus is form.field_handlers.handle_focus

    def test_handlers_shared_across_fields(self, form):
        """One handler instance serves every field."""
        assert form.control("name").on_change is form.control("email").on_change

    def test_binding_reflects_current_value(self, form):
        """Bindings are rebuilt, never stale."""
        stale = form.control("name")
        stale.on_change(FieldEvent("name", "Ada"))
        assert stale.value == ""
        assert form.control("name").value == "Ada"

    def test_binding_is_frozen(self, form):
        binding = form.control("name")
        with pytest.raises(AttributeError):
            binding.value = "x"

    def test_unknown_field_raises(self, form):
        with pytest.raises(UnknownFieldError):
            form.control("zzz")


class TestNotifications:
    """Test subscribe() and reference-equality change detection."""

    def test_change_notifies_once(self, form, notifications):
        form.handle_change(FieldEvent("name", "A"))
        assert notifications == [form]

    def test_noop_write_does_not_notify(self, form, notifications):
        """Writing the current value changes nothing."""
        fields_before = form.field_states.fields
        form.set_one("age", 18)
        assert notifications == []
        assert form.field_states.fields is fields_before

    def test_repeat_focus_does_not_notify(self, form, notifications):
        form.handle_focus(FieldEvent("name"))
        form.handle_focus(FieldEvent("name"))
        assert len(notifications) == 1

    def test_same_value_change_still_marks_dirty(self, form, notifications):
        """A change event with the current value still flips dirty once."""
        form.handle_change(FieldEvent("age", 18))
        assert form.field_states.is_dirty["age"] is True
        assert len(notifications) == 1

    def test_unsubscribe(self, form):
        seen = []
        unsubscribe = form.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        form.set_one("name", "x")
        assert seen == []

    def test_reset_is_one_transition(self, form, notifications):
        form.set_many({"name": "a", "email": "b"}, make_dirty=True)
        form.reset(clear_flags=True)
        assert len(notifications) == 2

    def test_close_drops_listeners(self, form, notifications):
        form.close()
        form.set_one("name", "x")
        assert notifications == []
