"""
Language-independent Rules
==========================
Rules whose behaviour is shared by many languages and which the German
profile configures with its own symbols and examples.
"""

from typing import Optional, Sequence

from ..base import RuleContext
from .base import Rule


class ConfigurableRule(Rule):
    """
    Rule with one integer threshold the user may override.

    The user's value (UserConfig.rule_values[rule_id]) wins over the
    default handed in by the catalog, which wins over DEFAULT_VALUE.
    """

    DEFAULT_VALUE: int = 0

    def __init__(self, context: RuleContext, default_value: Optional[int] = None, **kwargs):
        super().__init__(context, **kwargs)
        default = self.DEFAULT_VALUE if default_value is None else default_value
        self.value = context.effective_user_config.get_rule_value(self.rule_id, default)


class CommaWhitespaceRule(Rule):
    RULE_ID = "COMMA_PARENTHESIS_WHITESPACE"
    CATEGORY_ID = "TYPOGRAPHY"
    DESCRIPTION = "Leerzeichen vor/hinter Kommas und Klammern"


class GenericUnpairedBracketsRule(Rule):
    """Unbalanced quotes and brackets, for a configurable symbol set."""

    RULE_ID = "UNPAIRED_BRACKETS"
    CATEGORY_ID = "PUNCTUATION"
    DESCRIPTION = "Unpaarige Anführungszeichen und Klammern"

    def __init__(self, context: RuleContext, start_symbols: Sequence[str],
                 end_symbols: Sequence[str], **kwargs):
        if len(start_symbols) != len(end_symbols):
            raise ValueError(
                f"start_symbols ({len(start_symbols)}) and end_symbols "
                f"({len(end_symbols)}) must have the same length"
            )
        super().__init__(context, **kwargs)
        self.start_symbols = list(start_symbols)
        self.end_symbols = list(end_symbols)


class UppercaseSentenceStartRule(Rule):
    RULE_ID = "UPPERCASE_SENTENCE_START"
    CATEGORY_ID = "CASING"
    DESCRIPTION = "Großschreibung am Satzanfang"


class MultipleWhitespaceRule(Rule):
    RULE_ID = "WHITESPACE_RULE"
    CATEGORY_ID = "TYPOGRAPHY"
    DESCRIPTION = "Mehrfache Leerzeichen"


class WhiteSpaceBeforeParagraphEnd(Rule):
    RULE_ID = "WHITESPACE_PARAGRAPH"
    CATEGORY_ID = "TYPOGRAPHY"
    DESCRIPTION = "Leerzeichen am Absatzende"


class WhiteSpaceAtBeginOfParagraph(Rule):
    RULE_ID = "WHITESPACE_PARAGRAPH_BEGIN"
    CATEGORY_ID = "TYPOGRAPHY"
    DESCRIPTION = "Leerzeichen am Absatzanfang"


class EmptyLineRule(Rule):
    RULE_ID = "EMPTY_LINE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Leerzeile zwischen Absätzen"


class LongParagraphRule(ConfigurableRule):
    RULE_ID = "TOO_LONG_PARAGRAPH"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Sehr langer Absatz"
    DEFAULT_VALUE = 220


class PunctuationMarkAtParagraphEnd(Rule):
    RULE_ID = "PUNCTUATION_PARAGRAPH_END"
    CATEGORY_ID = "PUNCTUATION"
    DESCRIPTION = "Satzzeichen am Absatzende"

