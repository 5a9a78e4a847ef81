"""
normalizer.py — Loose human notation → strict SymPy syntax
===========================================================
Rewrites what people actually type into something ``parse_expr`` accepts:

    2x          → 2*x
    x^2         → x**2
    3(x+1)      → 3*(x+1)
    (x+1)(x-1)  → (x+1)*(x-1)
    x+1=3       → x+1-(3)

This is a handful of ordered regex substitutions, not a parser.  Known
limitations:
  • only the first '=' is consumed; anything after a second '=' is left for
    the engine to reject
  • comparison operators such as '>=' or '==' are not recognised
  • scientific notation and names ending in digits get split (1e5 → 1*e5,
    atan2(y) → atan2*(y))
"""

import re

_DIGIT_LETTER = re.compile(r'(\d)([a-zA-Z])')
_CLOSE_THEN_OPERAND = re.compile(r'(\))(\s*[a-zA-Z0-9])')
_DIGIT_OPEN = re.compile(r'(\d)(\s*\()')
_CLOSE_OPEN = re.compile(r'\)\s*\(')
_WHITESPACE = re.compile(r'\s+')
_EQUALS = re.compile(r'\s*=\s*')


def normalize(expression):
    """Return ``expression`` rewritten for the algebra engine.  Never raises."""
    if not isinstance(expression, str):
        return expression

    s = expression.strip()

    # Order matters: each step relies on the previous ones
    s = s.replace('^', '**')
    s = _DIGIT_LETTER.sub(r'\1*\2', s)
    s = _CLOSE_THEN_OPERAND.sub(r'\1*\2', s)
    s = _DIGIT_OPEN.sub(r'\1*(', s)
    s = _CLOSE_OPEN.sub(')*(', s)
    s = _WHITESPACE.sub(' ', s)

    # Equation → "lhs - (rhs)", i.e. expression equal to zero
    if '=' in s:
        s = _EQUALS.sub('-(', s, count=1) + ')'

    return s
