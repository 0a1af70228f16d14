#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for component to Discord markdown serialization."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatmd.components import (
    ClickEvent,
    NbtContents,
    ScoreContents,
    SelectorContents,
    TextComponent,
)
from chatmd.constants import ZERO_WIDTH_SPACE
from chatmd.exceptions import NestingDepthError, ProviderMissingError
from chatmd.options import MarkdownSerializerOptions
from chatmd.serializers import MarkdownSerializer, StyleRun

ZWSP = ZERO_WIDTH_SPACE


def serialize(component: TextComponent, **kwargs) -> str:
    return MarkdownSerializer().serialize(component, MarkdownSerializerOptions(**kwargs))


def siblings(*children: TextComponent) -> TextComponent:
    root = TextComponent.empty()
    for child in children:
        root.append(child)
    return root


@pytest.mark.unit
class TestStyleRun:
    """Test the style run value type."""

    def test_formatting_matches_ignores_content(self) -> None:
        """Test only flags are compared."""
        assert StyleRun("a", bold=True).formatting_matches(StyleRun("b", bold=True))
        assert not StyleRun("a", bold=True).formatting_matches(StyleRun("a", italic=True))

    def test_copy_replaces_content(self) -> None:
        """Test copies keep flags with new content."""
        run = StyleRun("text", bold=True, underline=True)
        copied = run.copy()

        assert copied.content == ""
        assert copied.formatting_matches(run)
        assert run.content == "text"

    def test_wrap_marker_order(self) -> None:
        """Test markers open bold, strikethrough, italic, underline and close in reverse."""
        run = StyleRun(bold=True, strikethrough=True, italic=True, underline=True)

        assert run.wrap("x") == "**~~___x___~~**"


@pytest.mark.unit
class TestMarkdownSerializer:
    """Test tree walking, merging and marker emission."""

    def test_plain_text(self) -> None:
        """Test a plain text node is emitted unchanged."""
        assert serialize(TextComponent.literal("Hello")) == "Hello"

    def test_child_with_different_style(self) -> None:
        """Test parent and child runs are separated by a zero width space."""
        tree = TextComponent.literal("Hi", bold=True).append(TextComponent.literal("there", italic=True))

        assert serialize(tree) == f"**Hi**{ZWSP}_there_"

    def test_equal_siblings_merge(self) -> None:
        """Test neighbouring runs with equal flags become one run."""
        tree = siblings(TextComponent.literal("A", bold=True), TextComponent.literal("B", bold=True))

        assert serialize(tree) == "**AB**"

    def test_flags_are_node_local(self) -> None:
        """Test children do not inherit the flags of their parent."""
        tree = TextComponent.literal("A", bold=True).append(TextComponent.literal("B"))

        assert serialize(tree) == f"**A**{ZWSP}B"

    def test_alternating_styles(self) -> None:
        """Test every style change starts a run."""
        tree = siblings(
            TextComponent.literal("A", bold=True),
            TextComponent.literal("B"),
            TextComponent.literal("C", bold=True),
        )

        assert serialize(tree) == f"**A**{ZWSP}B{ZWSP}**C**"

    def test_color_only_difference_merges(self) -> None:
        """Test styles lost in markdown do not split runs."""
        tree = siblings(TextComponent.literal("red ", color="red"), TextComponent.literal("blue", color="blue"))

        assert serialize(tree) == "red blue"

    def test_empty_runs_elided(self) -> None:
        """Test empty nodes add no markers and no separators."""
        tree = siblings(
            TextComponent.literal("", bold=True),
            TextComponent.literal("x"),
            TextComponent.literal("", italic=True),
        )

        assert serialize(tree) == "x"

    def test_empty_node_does_not_split_equal_runs(self) -> None:
        """Test runs separated only by empty nodes still merge."""
        tree = siblings(
            TextComponent.literal("A", bold=True),
            TextComponent.literal(""),
            TextComponent.literal("B", bold=True),
        )

        assert serialize(tree) == "**AB**"

    def test_legacy_only_node_does_not_split_equal_runs(self) -> None:
        """Test a node emptied by stripping does not split its neighbours."""
        tree = siblings(
            TextComponent.literal("A", italic=True),
            TextComponent.literal("§r"),
            TextComponent.empty(),
            TextComponent.literal("B", italic=True),
        )

        assert serialize(tree) == "_AB_"

    def test_empty_tree(self) -> None:
        """Test an empty component serializes to an empty string."""
        assert serialize(TextComponent.empty()) == ""

    def test_escapes_special_characters(self) -> None:
        """Test unescaped markdown characters are escaped."""
        assert serialize(TextComponent.literal("2*3")) == "2\\*3"

    def test_escaping_disabled(self) -> None:
        """Test content is kept verbatim without escaping."""
        assert serialize(TextComponent.literal("2*3"), escape_markdown=False) == "2*3"

    def test_legacy_formatting_stripped(self) -> None:
        """Test section-sign codes are removed."""
        assert serialize(TextComponent.literal("§cRed")) == "Red"
        assert serialize(TextComponent.literal("§cRed"), strip_legacy_formatting=False) == "§cRed"

    def test_run_with_only_legacy_codes_elided(self) -> None:
        """Test a run emptied by stripping produces nothing."""
        tree = siblings(TextComponent.literal("§l", bold=True), TextComponent.literal("x"))

        assert serialize(tree) == "x"

    def test_embedded_links(self) -> None:
        """Test components opening a URL become markdown links."""
        link = TextComponent.literal("site_name").styled(click_event=ClickEvent("open_url", "https://x.test/a_b"))

        assert serialize(link, embed_links=True) == "[site\\_name](https://x.test/a_b)"
        assert serialize(link) == "site\\_name"

    def test_other_click_actions_not_embedded(self) -> None:
        """Test only open_url actions become links."""
        command = TextComponent.literal("run").styled(click_event=ClickEvent("run_command", "/spawn"))

        assert serialize(command, embed_links=True) == "run"

    def test_score_and_selector(self) -> None:
        """Test score and selector nodes use their embedded text."""
        tree = siblings(
            TextComponent(contents=ScoreContents("@p", "kills")),
            TextComponent.literal(" "),
            TextComponent(contents=SelectorContents("@a")),
        )

        assert serialize(tree) == "kills @a"

    def test_unknown_contents_are_empty(self) -> None:
        """Test contents without text resolve to nothing."""
        assert serialize(TextComponent(contents=NbtContents("Inventory"))) == ""

    def test_default_providers(self) -> None:
        """Test keybinds show their name and translations their fallback or key."""
        assert serialize(TextComponent.keybind("key.jump")) == "key.jump"
        assert serialize(TextComponent.translatable("chat.hi", fallback="Hello")) == "Hello"
        assert serialize(TextComponent.translatable("chat.hi")) == "chat.hi"

    def test_custom_providers(self) -> None:
        """Test configured providers resolve keybind and translation text."""
        options = (
            MarkdownSerializerOptions.defaults()
            .with_keybind_provider(lambda component: "Space")
            .with_translation_provider(lambda component: "Bonjour")
        )
        tree = siblings(TextComponent.keybind("key.jump"), TextComponent.literal(" "), TextComponent.translatable("x"))

        assert MarkdownSerializer().serialize(tree, options) == "Space Bonjour"

    def test_missing_keybind_provider(self) -> None:
        """Test a keybind without provider fails when encountered."""
        options = MarkdownSerializerOptions.defaults().with_keybind_provider(None)

        assert MarkdownSerializer().serialize(TextComponent.literal("ok"), options) == "ok"
        with pytest.raises(ProviderMissingError) as exc_info:
            MarkdownSerializer().serialize(TextComponent.keybind("key.jump"), options)
        assert exc_info.value.parameter_name == "keybind_provider"

    def test_missing_translation_provider(self) -> None:
        """Test a translatable node without provider fails when encountered."""
        options = MarkdownSerializerOptions.defaults().with_translation_provider(None)

        with pytest.raises(ProviderMissingError):
            MarkdownSerializer().serialize(TextComponent.translatable("x"), options)

    def test_depth_limit(self) -> None:
        """Test trees deeper than the limit raise NestingDepthError."""
        root = TextComponent.literal("0")
        node = root
        for index in range(1, 10):
            child = TextComponent.literal(str(index))
            node.append(child)
            node = child

        assert serialize(root, max_depth=10) == "0123456789"
        with pytest.raises(NestingDepthError) as exc_info:
            serialize(root, max_depth=5)
        assert exc_info.value.limit == 5

    def test_fixture_message(self, styled_message: TextComponent) -> None:
        """Test a realistic message with styles, a keybind and a link."""
        expected = (
            f"**[Server] **{ZWSP}Press {ZWSP}_key.jump_{ZWSP} to read {ZWSP}"
            "__[the rules](https://example.com/rules)__"
        )

        assert serialize(styled_message, embed_links=True) == expected

    def test_serializer_default_options(self) -> None:
        """Test options given at construction are used when none are passed."""
        serializer = MarkdownSerializer(options=MarkdownSerializerOptions(escape_markdown=False))

        assert serializer.serialize(TextComponent.literal("a*b")) == "a*b"


_flags = st.booleans()
_leaves = st.builds(
    lambda text, bold, italic, underlined, strikethrough: TextComponent.literal(
        text, bold=bold, italic=italic, underlined=underlined, strikethrough=strikethrough
    ),
    st.text(alphabet="ab *_~", max_size=3),
    _flags,
    _flags,
    _flags,
    _flags,
)
_trees = st.recursive(
    _leaves,
    lambda children: st.tuples(_leaves, st.lists(children, max_size=3)).map(
        lambda pair: TextComponent(contents=pair[0].contents, style=pair[0].style, children=pair[1])
    ),
    max_leaves=15,
)


@pytest.mark.unit
class TestMarkdownSerializerProperties:
    """Property-based tests of the run invariants."""

    @given(_trees)
    def test_no_adjacent_equal_runs(self, tree: TextComponent) -> None:
        """Test runs are non-empty and no two neighbours share their flags."""
        runs = MarkdownSerializer().collect_runs(tree, MarkdownSerializerOptions())

        assert all(run.content for run in runs)
        for left, right in zip(runs, runs[1:]):
            assert not left.formatting_matches(right)

    @given(_trees)
    def test_one_separator_between_runs(self, tree: TextComponent) -> None:
        """Test separators appear only between runs, once each."""
        serializer = MarkdownSerializer()
        options = MarkdownSerializerOptions()
        output = serializer.serialize(tree, options)
        runs = serializer.collect_runs(tree, options)

        assert not output.startswith(ZWSP)
        assert not output.endswith(ZWSP)
        assert ZWSP * 2 not in output
        assert output.count(ZWSP) == max(len(runs) - 1, 0)
