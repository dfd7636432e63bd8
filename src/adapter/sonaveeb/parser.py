"""Sõnaveeb HTML parsing.

Pure functions from page HTML to plain data. The selectors below are the
only place that knows Sõnaveeb's markup.
"""

from bs4 import BeautifulSoup, Tag

from domain.model.dictionary_entry import Meaning, PartOfSpeech

HTML_PARSER = "html.parser"

# Search page: one element per homonym, in the site's ranking order
WORD_ID_SELECTOR = "[data-word-id]"

# Word details fragment
PART_OF_SPEECH_SELECTOR = ".pos-tag"
MEANING_SELECTOR = ".meaning"
DEFINITION_SELECTOR = ".definition-value"
EXAMPLE_SELECTOR = ".example-text-value"
PARADIGM_CELL_SELECTOR = "[data-morph-code]"
FORM_VALUE_SELECTOR = ".form-value"

# Placeholder the paradigm table uses for forms that do not exist
MISSING_FORM = "-"


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, HTML_PARSER)


def _text(tag: Tag) -> str:
    return " ".join(tag.get_text(" ", strip=True).split())


def parse_word_ids(html: str) -> list[str]:
    """Homonym ids from a search result page, first match first."""
    word_ids: list[str] = []
    for tag in _soup(html).select(WORD_ID_SELECTOR):
        word_id = str(tag.get("data-word-id", "")).strip()
        if word_id and word_id not in word_ids:
            word_ids.append(word_id)
    return word_ids


def parse_part_of_speech(html: str) -> tuple[PartOfSpeech, ...]:
    """Known part-of-speech tags in page order; unknown labels are skipped."""
    tags: list[PartOfSpeech] = []
    for tag in _soup(html).select(PART_OF_SPEECH_SELECTOR):
        # Tag text can be abbreviated; the full label sits in the title
        label = str(tag.get("title") or _text(tag))
        pos = PartOfSpeech.from_label(label)
        if pos is not None and pos not in tags:
            tags.append(pos)
    return tuple(tags)


def parse_meanings(html: str) -> tuple[Meaning, ...]:
    """Definitions with their usage examples; meanings without text are skipped."""
    meanings: list[Meaning] = []
    for block in _soup(html).select(MEANING_SELECTOR):
        definition_tag = block.select_one(DEFINITION_SELECTOR)
        if definition_tag is None:
            continue
        definition = _text(definition_tag)
        if not definition:
            continue
        examples = tuple(
            text for text in (_text(example) for example in block.select(EXAMPLE_SELECTOR)) if text
        )
        meanings.append(Meaning(definition=definition, examples=examples))
    return tuple(meanings)


def parse_paradigm(html: str) -> dict[str, tuple[str, ...]]:
    """Morphology code -> surface forms, from the paradigm table.

    A cell may list variants in separate ``.form-value`` spans; cells
    without spans are read as a single form.
    """
    paradigm: dict[str, list[str]] = {}
    for cell in _soup(html).select(PARADIGM_CELL_SELECTOR):
        code = str(cell.get("data-morph-code", "")).strip()
        if not code:
            continue
        values = [_text(span) for span in cell.select(FORM_VALUE_SELECTOR)] or [_text(cell)]
        forms = paradigm.setdefault(code, [])
        for value in values:
            if value and value != MISSING_FORM and value not in forms:
                forms.append(value)
    return {code: tuple(forms) for code, forms in paradigm.items() if forms}
