"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names cannot be shadowed by user definitions in call position.

Every handler has the signature

    handler(tail, env, options, evaluate_fn, depth) -> LispValue

where `tail` is the unevaluated operand list.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.arithmetic_forms import BINARY_FORMS
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.list_forms import atom_form, cons_form, car_form, cdr_form
from minilisp.evaluation.special_forms.progn_form import progn_form
from minilisp.evaluation.special_forms.quote_forms import quote_form

SPECIAL_FORMS = {
    **BINARY_FORMS,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("atom"): atom_form,
    Symbol("quote"): quote_form,
    Symbol("cons"): cons_form,
    Symbol("car"): car_form,
    Symbol("cdr"): cdr_form,
    Symbol("progn"): progn_form,
}
