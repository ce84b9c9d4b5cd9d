"""Unit tests for the text cleaning pipeline."""

import pytest
from pydantic import ValidationError

from textprep.cleaners.text_cleaner import (
    TextCleaner,
    clean_text_simple,
    collapse_whitespace,
    compress_repeats,
    mask_numbers,
    remove_hashtags,
    remove_mentions,
    remove_punctuation,
    remove_urls,
)
from textprep.models.cleaning import CleaningConfig

JOY = chr(0x1F602)  # face with tears of joy
TWEET = f"Sooooo cooool!!! visit https://x.co @aa #fun {JOY}"


class TestStepFunctions:
    """Tests for the individual cleaning steps."""

    def test_remove_urls(self):
        """Test http(s) and www links are removed."""
        text = "see https://example.com/a?b=1 and www.test.org now"
        assert collapse_whitespace(remove_urls(text)) == "see and now"

    def test_remove_urls_case_insensitive(self):
        """Test upper-case schemes are matched."""
        assert remove_urls("HTTPS://X.CO").strip() == ""

    def test_remove_mentions(self):
        """Test @mentions are removed but emails are kept."""
        text = "@bob hi mail me at me@example.com"
        assert collapse_whitespace(remove_mentions(text)) == "hi mail me at me@example.com"

    def test_remove_hashtags(self):
        """Test hashtags are removed including the word."""
        assert collapse_whitespace(remove_hashtags("great #fun day #2024")) == "great day"

    def test_compress_repeats_default(self):
        """Test runs longer than two are shortened to two."""
        assert compress_repeats("Sooooo cooool!!!") == "Soo cool!!"

    def test_compress_repeats_custom_limit(self):
        """Test a custom max_repeat is honored."""
        assert compress_repeats("yesssss", max_repeat=3) == "yesss"
        assert compress_repeats("yesssss", max_repeat=1) == "yes"

    def test_compress_repeats_keeps_digits(self):
        """Test numbers are never shortened."""
        assert compress_repeats("1000000 followers") == "1000000 followers"

    def test_compress_repeats_short_runs_untouched(self):
        """Test runs within the limit are unchanged."""
        assert compress_repeats("book keeper") == "book keeper"

    def test_compress_repeats_invalid_limit(self):
        """Test max_repeat below 1 raises."""
        with pytest.raises(ValueError):
            compress_repeats("aaa", max_repeat=0)

    def test_collapse_whitespace(self):
        """Test whitespace runs collapse and ends are stripped."""
        assert collapse_whitespace("  a \t\n b   c ") == "a b c"

    def test_mask_numbers(self):
        """Test integers and decimals are masked."""
        assert mask_numbers("paid 3.50 for 2 items") == "paid <num> for <num> items"
        assert mask_numbers("1,000 likes", token="#") == "# likes"

    def test_remove_punctuation_keeps_markers(self):
        """Test punctuation is removed but # and @ survive."""
        assert remove_punctuation("wow!!! #fun, @bob.") == "wow #fun @bob"


class TestCleanTextSimple:
    """Tests for the default cleaning function."""

    def test_tutorial_example(self):
        """Test the tweet from the tutorial notes."""
        assert clean_text_simple(TWEET) == f"soo cool!! visit #fun {JOY}"

    def test_remove_hashtags_and_emoji(self):
        """Test the optional removals."""
        result = clean_text_simple(TWEET, remove_hashtags=True, remove_emoji=True)
        assert result == "soo cool!! visit"

    def test_keep_case(self):
        """Test lowercase=False preserves case."""
        assert clean_text_simple("Hello World!!!!", lowercase=False) == "Hello World!!"

    def test_runs_created_by_casefold_are_compressed(self):
        """Test runs that only appear after casefolding are shortened too."""
        assert clean_text_simple("NOooooo") == "noo"
        assert clean_text_simple("SSs") == "ss"
        assert clean_text_simple("ßs") == "ss"

    def test_normalizes_and_translates(self):
        """Test NFKC and the translation tables run before the rest."""
        text = f"{chr(0x201C)}Caf{chr(0x00E9)}{chr(0x201D)}{chr(0x00A0)}{chr(0x2014)} {chr(0xFB01)}ne"
        assert clean_text_simple(text) == f'"caf{chr(0x00E9)}" - fine'

    def test_empty_string(self):
        """Test empty input yields empty output."""
        assert clean_text_simple("") == ""

    def test_only_removable_content(self):
        """Test text made only of URLs and mentions becomes empty."""
        assert clean_text_simple("@a @b https://x.co") == ""

    def test_non_string_raises(self):
        """Test non-string input is rejected."""
        with pytest.raises(TypeError):
            clean_text_simple(None)
        with pytest.raises(TypeError):
            clean_text_simple(b"bytes")

    def test_invalid_max_repeat(self):
        """Test max_repeat < 1 raises ValueError."""
        with pytest.raises(ValueError):
            clean_text_simple("aaa", max_repeat=0)

    @pytest.mark.parametrize(
        "text",
        [
            TWEET,
            "SSs",
            "Ooo",
            "ßs",
            "AAa!!",
            "NOooooo WAYyy",
            f"a{JOY}aa",
            "Streeeeet htttps://x.co wwww.example.com",
        ],
    )
    @pytest.mark.parametrize("remove_emoji", [False, True])
    def test_idempotent(self, text, remove_emoji):
        """Test cleaning twice gives the same result as cleaning once."""
        once = clean_text_simple(text, remove_emoji=remove_emoji)
        assert clean_text_simple(once, remove_emoji=remove_emoji) == once

    def test_idempotent_with_punctuation_removal(self):
        """Test runs joined by punctuation removal are compressed in the same pass."""
        cleaner = TextCleaner(CleaningConfig(remove_punctuation=True))
        once = cleaner.clean("a.aa b!bb")
        assert once == "aa bb"
        assert cleaner.clean(once) == once

    def test_stretched_url_is_removed(self):
        """Test a URL with a stretched scheme is removed before compression."""
        assert clean_text_simple("see htttps://x.co now") == "see now"


class TestTextCleaner:
    """Tests for the configurable pipeline."""

    def test_default_steps(self):
        """Test the default configuration enables the standard steps in order."""
        cleaner = TextCleaner()
        assert cleaner.steps == [
            "normalize",
            "translate_characters",
            "remove_urls",
            "remove_mentions",
            "compress_repeats",
            "collapse_whitespace",
            "lowercase",
            "recompress_repeats",
        ]

    def test_no_recompress_when_nothing_creates_runs(self):
        """Test the final pass is skipped when no later step can create runs."""
        assert "recompress_repeats" not in TextCleaner(CleaningConfig(lowercase=False)).steps
        assert "recompress_repeats" in TextCleaner(
            CleaningConfig(lowercase=False, remove_emoji=True)
        ).steps

    def test_optional_steps_order(self):
        """Test optional steps slot into the pipeline."""
        config = CleaningConfig(
            remove_hashtags=True,
            remove_emoji=True,
            strip_accents=True,
            remove_control_characters=True,
            mask_numbers=True,
            remove_punctuation=True,
            chinese_conversion="t2s",
            max_repeat=None,
            lowercase=False,
        )
        assert TextCleaner(config).steps == [
            "normalize",
            "remove_control_characters",
            "translate_characters",
            "chinese_conversion",
            "strip_accents",
            "remove_urls",
            "remove_mentions",
            "remove_hashtags",
            "mask_numbers",
            "remove_emoji",
            "remove_punctuation",
            "collapse_whitespace",
        ]

    def test_matches_clean_text_simple(self):
        """Test the default cleaner agrees with clean_text_simple."""
        assert TextCleaner().clean(TWEET) == clean_text_simple(TWEET)

    def test_keep_urls_and_mentions(self):
        """Test URL and mention removal can be disabled."""
        cleaner = TextCleaner(CleaningConfig(remove_urls=False, remove_mentions=False))
        assert cleaner.clean("Hi @Bob https://X.co") == "hi @bob https://x.co"

    def test_strip_accents_and_mask_numbers(self):
        """Test accent stripping and number masking together."""
        cleaner = TextCleaner(CleaningConfig(strip_accents=True, mask_numbers=True))
        assert cleaner.clean(f"Caf{chr(0x00E9)} costs 4.50") == "cafe costs <num>"

    def test_remove_punctuation(self):
        """Test punctuation removal in the pipeline."""
        cleaner = TextCleaner(CleaningConfig(remove_punctuation=True))
        assert cleaner.clean("Wow... really?! #fun") == "wow really #fun"

    def test_chinese_conversion(self):
        """Test Traditional Chinese is converted to Simplified."""
        cleaner = TextCleaner(CleaningConfig(chinese_conversion="t2s"))
        assert cleaner.clean("我愛學習") == "我爱学习"

    def test_clean_with_report(self):
        """Test the report lists changed steps and removal counts."""
        cleaner = TextCleaner(CleaningConfig(remove_hashtags=True, remove_emoji=True))
        result = cleaner.clean_with_report(TWEET)

        assert result.cleaned == "soo cool!! visit"
        assert result.original == TWEET
        assert result.changed is True
        assert result.removed == {"urls": 1, "mentions": 1, "hashtags": 1, "emoji": 1}
        assert "remove_urls" in result.applied_steps
        assert "compress_repeats" in result.applied_steps
        assert "normalize" not in result.applied_steps

    def test_clean_with_report_unchanged(self):
        """Test a clean text reports no applied steps."""
        result = TextCleaner().clean_with_report("already clean")
        assert result.changed is False
        assert result.applied_steps == []
        assert result.removed["urls"] == 0

    def test_clean_many_is_lazy(self):
        """Test clean_many yields results one at a time."""
        results = TextCleaner().clean_many(["A!!!!", "B  C"])
        assert next(results) == "a!!"
        assert list(results) == ["b c"]

    def test_invalid_config(self):
        """Test invalid configuration is rejected by pydantic."""
        with pytest.raises(ValidationError):
            CleaningConfig(max_repeat=0)
        with pytest.raises(ValidationError):
            CleaningConfig(chinese_conversion="x2y")
        with pytest.raises(ValidationError):
            CleaningConfig(normalization_form="NFX")
