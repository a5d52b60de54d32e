"""Name derivation for components and props."""

from __future__ import annotations

import re

DIALECT_SUFFIX = ".mist.css"

# Names every emitted component already binds (children, rest props, lookup
# table) plus the ones React and Vue consume before props reach the component.
RESERVED_PROPS = frozenset({
    "children", "class", "className", "classes", "style", "slot", "props",
    "variantClasses", "key", "ref",
})

_WORD_SPLIT_RE = re.compile(r"[-_\s.]+")
_JS_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_NON_IDENT_RE = re.compile(r"[^A-Za-z0-9_$]")

COMPONENT_PREFIX = "Mist"

_JS_RESERVED = frozenset(
    "break case catch const continue debugger default delete do else enum export "
    "extends false finally for function if import in instanceof let new null "
    "return static super switch this throw true try typeof var void while with "
    "yield await"
    .split()
)


def _words(text: str) -> list[str]:
    return [w for w in _WORD_SPLIT_RE.split(text) if w]


def camel_case(token: str) -> str:
    """``full-width`` -> ``fullWidth``."""
    words = _words(token)
    if not words:
        return ""
    return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])


def pascal_case(text: str) -> str:
    """``icon-button`` -> ``IconButton``."""
    return "".join(w[:1].upper() + w[1:] for w in _words(text))


def base_name(path: str) -> str:
    """Strip directories and the dialect suffix: ``ui/card.mist.css`` -> ``card``."""
    name = re.split(r"[\\/]", path)[-1]
    if name.endswith(DIALECT_SUFFIX):
        name = name[: -len(DIALECT_SUFFIX)]
    return name


def component_name(path: str) -> str:
    """Component identifier for the stylesheet at *path*.

    Characters JavaScript identifiers cannot hold are dropped; a name left
    starting with a digit gets the ``Mist`` prefix (``2col`` -> ``Mist2col``).
    """
    name = _NON_IDENT_RE.sub("", pascal_case(base_name(path)))
    if name[:1].isdigit():
        name = COMPONENT_PREFIX + name
    return name


def is_valid_prop(name: str) -> bool:
    """True if *name* can be used as a prop in every emitter target."""
    return (
        bool(_JS_IDENT_RE.match(name))
        and name not in RESERVED_PROPS
        and name not in _JS_RESERVED
    )
