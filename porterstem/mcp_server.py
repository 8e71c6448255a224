"""
porterstem MCP Server — Expose the Porter stemmer as MCP tools.

Usage:
    python3 -m porterstem.mcp_server

Boundary policy comes from PORTERSTEM_STRICT / PORTERSTEM_LOWERCASE /
PORTERSTEM_MIN_LENGTH. Debug log goes to PORTERSTEM_MCP_LOG
(default: /tmp/porterstem-mcp.log).

Add to an MCP client config:
    {
      "mcpServers": {
        "porterstem": {
          "command": "python3",
          "args": ["-m", "porterstem.mcp_server"],
          "env": {"PORTERSTEM_STRICT": "0"}
        }
      }
    }
"""

import logging
import os

from mcp.server.fastmcp import FastMCP

from porterstem.config import StemmerConfig
from porterstem.letters import contains_vowel, cv_pattern, ends_cvc, ends_double_consonant, measure
from porterstem.stemmer import PorterStemmer
from porterstem.validation import InvalidWordError, validate_word

LOG_PATH = os.environ.get("PORTERSTEM_MCP_LOG", "/tmp/porterstem-mcp.log")

mcp = FastMCP("porterstem")

logger = logging.getLogger(__name__)

# Lazy singleton
_stemmer: PorterStemmer | None = None


def _get_stemmer() -> PorterStemmer:
    global _stemmer
    if _stemmer is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [porterstem] %(message)s",
            handlers=[logging.FileHandler(LOG_PATH, mode="a")],
        )
        try:
            config = StemmerConfig.from_env()
        except ValueError as e:
            logger.warning(f"Bad PORTERSTEM_* setting ({e}), using defaults")
            config = StemmerConfig.default()
        logger.info(f"Stemmer initialized: {config}")
        _stemmer = PorterStemmer(config)
    return _stemmer


@mcp.tool(name="stem", description="Reduce an English word to its Porter stem")
def stem_word(word: str) -> dict:
    """Stem a single word."""
    try:
        return {"word": word, "stem": _get_stemmer().stem(word)}
    except InvalidWordError as e:
        return {"error": str(e), "word": word}


@mcp.tool(name="stem_batch", description="Stem a list of English words")
def stem_batch(words: list[str]) -> dict:
    """Stem many words; invalid ones are reported instead of failing the batch."""
    stemmer = _get_stemmer()
    stems = []
    errors = []
    for word in words:
        try:
            stems.append(stemmer.stem(word))
        except InvalidWordError as e:
            stems.append(None)
            errors.append({"word": word, "error": e.reason})
    return {"stems": stems, "errors": errors}


@mcp.tool(name="trace", description="Show which Porter rule fired at each step for a word")
def trace_word(word: str) -> dict:
    """Step-by-step stemming of a word."""
    try:
        trace = _get_stemmer().trace(word)
    except InvalidWordError as e:
        return {"error": str(e), "word": word}
    return {
        "word": trace.word,
        "stem": trace.stem,
        "skipped": trace.skipped,
        "steps": [
            {
                "step": s.step,
                "before": s.before,
                "after": s.after,
                "rules": [r.describe() for r in s.rules],
            }
            for s in trace.changes()
        ],
    }


@mcp.tool(name="measure", description="Get the Porter measure and pattern tests for a word")
def measure_word(word: str) -> dict:
    """Letter classification for a word: CV pattern, m, *v*, *d, *o."""
    try:
        normalized, ok = validate_word(word, _get_stemmer().config)
    except InvalidWordError as e:
        return {"error": str(e), "word": word}
    if not ok:
        return {"error": f"{word!r} is not a plain lowercase word", "word": word}
    return {
        "word": normalized,
        "pattern": cv_pattern(normalized),
        "measure": measure(normalized),
        "contains_vowel": contains_vowel(normalized),
        "ends_double_consonant": ends_double_consonant(normalized),
        "ends_cvc": ends_cvc(normalized),
    }


if __name__ == "__main__":
    mcp.run()
