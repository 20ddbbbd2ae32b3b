"""Tests for the link transformer."""

from src.guide_processor.link_transformer import LinkTransformer


class TestLinkTransformer:
    """Test bracketed link rewriting."""

    def setup_method(self):
        self.links = LinkTransformer()

    def test_link_in_sentence(self):
        result = self.links.transform("See [Contents](TOC) page.")
        assert result == 'See @{"Contents" LINK TOC} page.'

    def test_link_at_start_of_line(self):
        assert self.links.transform("[A](B)") == '@{"A" LINK B}'

    def test_two_links(self):
        result = self.links.transform("[One](N1) and [Two](N2)")
        assert result == '@{"One" LINK N1} and @{"Two" LINK N2}'

    def test_bracket_inside_word_is_literal(self):
        assert self.links.transform("x[A](B)") == "x[A](B)"

    def test_escaped_bracket(self):
        assert self.links.transform("^[Literal]") == "[Literal]"

    def test_escape_before_other_character_is_kept(self):
        assert self.links.transform("a ^* b") == "a ^* b"

    def test_unterminated_label_is_left_open(self):
        assert self.links.transform("see [label") == 'see @{"label'

    def test_unterminated_target_is_left_open(self):
        assert self.links.transform("see [a](b") == 'see @{"a" LINK b'

    def test_parentheses_outside_link_are_literal(self):
        line = "(see above) for details"
        assert self.links.transform(line) == line

    def test_no_brackets_is_identity(self):
        line = "Plain line with *stars* and _underscores_."
        assert self.links.transform(line) == line

    def test_target_is_not_validated(self):
        result = self.links.transform("[Gone](NOWHERE)")
        assert result == '@{"Gone" LINK NOWHERE}'

    def test_empty_line(self):
        assert self.links.transform("") == ""

    def test_only_escape_markers(self):
        assert self.links.transform("^^^") == ""
