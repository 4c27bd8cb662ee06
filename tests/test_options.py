"""Tests for validating pagination options."""

from types import SimpleNamespace

import pytest

from mika.errors import ConfigurationError
from mika.pagination.options import DEFAULT_TIMEOUT
from mika.pagination.options import NavigationSymbols
from mika.pagination.options import PaginationOptions
from mika.pagination.state import Action
from mika.pagination.transport import Identity


class TestNavigationSymbols:
    """Tests for NavigationSymbols."""

    def test_defaults_are_distinct(self):
        symbols = NavigationSymbols()
        assert len({symbols.back, symbols.jump, symbols.forward, symbols.delete}) == 4

    def test_duplicates_rejected(self):
        with pytest.raises(ConfigurationError):
            NavigationSymbols(back="x", jump="y", forward="x", delete="z")

    def test_empty_rejected(self):
        with pytest.raises(ConfigurationError):
            NavigationSymbols(back="")

    def test_lookup_both_ways(self):
        symbols = NavigationSymbols(back="a", jump="b", forward="c", delete="d")
        assert symbols.symbol_for(Action.FORWARD) == "c"
        assert symbols.action_for("d") is Action.DELETE
        assert symbols.action_for("z") is None
        assert "b" in symbols
        assert "z" not in symbols


class TestPaginationOptions:
    """Tests for PaginationOptions.create."""

    def test_defaults(self):
        options = PaginationOptions.create(["a", "b"], "channel")
        assert options.pages == ("a", "b")
        assert options.page_count == 2
        assert options.initial_page == 1
        assert options.timeout == DEFAULT_TIMEOUT
        assert options.show_page_indicator is True
        assert options.authorised_user is None
        assert options.symbols == NavigationSymbols()
        assert options.cancel_token == "cancel"

    def test_is_immutable(self):
        options = PaginationOptions.create(["a"], "channel")
        with pytest.raises(AttributeError):
            options.initial_page = 2

    def test_empty_pages_rejected(self):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create([], "channel")

    def test_string_is_not_pages(self):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create("abc", "channel")

    def test_missing_destination_rejected(self):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], None)

    @pytest.mark.parametrize("page", [0, 4, "nope"])
    def test_bad_initial_page_rejected(self, page):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a", "b", "c"], "channel", initial_page=page)

    def test_initial_page_tokens(self):
        assert PaginationOptions.create(["a", "b", "c"], "channel", initial_page="back").initial_page == 1
        assert PaginationOptions.create(["a", "b", "c"], "channel", initial_page="forward").initial_page == 2
        assert PaginationOptions.create(["a"], "channel", initial_page="forward").initial_page == 1

    def test_numeric_string_initial_page(self):
        assert PaginationOptions.create(["a", "b", "c"], "channel", initial_page="3").initial_page == 3

    @pytest.mark.parametrize("timeout", [0, -5, "30", True, None])
    def test_bad_timeout_rejected(self, timeout):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", timeout=timeout)

    def test_integer_timeout_accepted(self):
        assert PaginationOptions.create(["a"], "channel", timeout=240).timeout == 240.0

    def test_symbol_mapping(self):
        symbols = {"back": "a", "jump": "b", "forward": "c", "delete": "d"}
        options = PaginationOptions.create(["a"], "channel", symbols=symbols)
        assert options.symbols == NavigationSymbols(back="a", jump="b", forward="c", delete="d")

    def test_partial_symbol_mapping_rejected(self):
        with pytest.raises(ConfigurationError, match="delete"):
            PaginationOptions.create(["a"], "channel", symbols={"back": "a", "jump": "b", "forward": "c"})

    def test_duplicate_symbol_mapping_rejected(self):
        symbols = {"back": "a", "jump": "a", "forward": "c", "delete": "d"}
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", symbols=symbols)

    def test_cancel_token_normalised(self):
        assert PaginationOptions.create(["a"], "channel", cancel_token=" Stop ").cancel_token == "stop"

    def test_bad_indicator_flag_rejected(self):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", show_page_indicator="yes")

    @pytest.mark.parametrize("prompt", [None, "", "   ", 42])
    def test_bad_jump_prompt_rejected(self, prompt):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", jump_prompt=prompt)


class TestAuthorisation:
    """Tests for deciding who may press buttons."""

    def test_authorised_user_only(self):
        options = PaginationOptions.create(["a"], "channel", authorised_user=Identity(id=7))
        assert options.authorised_user == 7
        assert options.is_authorised(Identity(id=7))
        assert not options.is_authorised(Identity(id=8))

    def test_authorised_user_by_id(self):
        options = PaginationOptions.create(["a"], "channel", authorised_user=7)
        assert options.is_authorised(Identity(id=7))

    def test_anyone_but_bots_by_default(self):
        options = PaginationOptions.create(["a"], "channel")
        assert options.is_authorised(Identity(id=8))
        assert not options.is_authorised(Identity(id=9, is_bot=True))

    def test_custom_identity_filter(self):
        options = PaginationOptions.create(["a"], "channel", identity_filter=lambda identity: identity.id % 2 == 0)
        assert options.is_authorised(Identity(id=2))
        assert not options.is_authorised(Identity(id=3))

    def test_identity_filter_must_be_callable(self):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", identity_filter="nobody")

    def test_authorised_user_as_member(self):
        member = SimpleNamespace(id=7, bot=False, name="someone")
        options = PaginationOptions.create(["a"], "channel", authorised_user=member)
        assert options.authorised_user == 7
        assert options.is_authorised(Identity(id=7))
        assert not options.is_authorised(Identity(id=8))

    @pytest.mark.parametrize("user", ["7", 7.0, True, SimpleNamespace(id="7"), SimpleNamespace(name="nobody")])
    def test_unrecognised_authorised_user_rejected(self, user):
        with pytest.raises(ConfigurationError):
            PaginationOptions.create(["a"], "channel", authorised_user=user)
