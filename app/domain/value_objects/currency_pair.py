"""Currency pair value object."""

from dataclasses import dataclass

DEFAULT_PAIR_TAG_FORMAT = "{from}-{to}"


@dataclass(frozen=True)
class CurrencyPair:
    """A directional (from, to) pair used to look up external quotes."""

    source: str
    target: str

    def tag(self, template: str = DEFAULT_PAIR_TAG_FORMAT) -> str:
        """
        Render the pair tag used as the provider lookup key.

        Args:
            template: Format string with ``{from}`` and ``{to}`` placeholders

        Example:
            >>> CurrencyPair("USD", "BRL").tag()
            'USD-BRL'
            >>> CurrencyPair("USD", "BRL").tag("{to}_{from}")
            'BRL_USD'
        """
        return template.format_map({"from": self.source, "to": self.target})

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"
