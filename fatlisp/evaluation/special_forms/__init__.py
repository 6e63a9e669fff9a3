"""Registry of special forms for the fatlisp evaluator.

Maps names to handler functions and their signatures. The forms are ordinary
values bound in the global environment (so a program can shadow them);
`new_special_forms` builds fresh instances for each global environment.
"""

from fatlisp.types.callables import SpecialForm
from fatlisp.evaluation.special_forms.quote_form import quote_form, QUOTE_SIGNATURE
from fatlisp.evaluation.special_forms.lambda_form import lambda_form, FN_SIGNATURE
from fatlisp.evaluation.special_forms.define_form import define_form, DEF_SIGNATURE
from fatlisp.evaluation.special_forms.if_form import if_form, IF_SIGNATURE

SPECIAL_FORMS = {
    "quote": (QUOTE_SIGNATURE, quote_form),
    "fn": (FN_SIGNATURE, lambda_form),
    "def": (DEF_SIGNATURE, define_form),
    "if": (IF_SIGNATURE, if_form),
}


def new_special_forms() -> dict[str, SpecialForm]:
    return {name: SpecialForm(signature, handler) for name, (signature, handler) in SPECIAL_FORMS.items()}
