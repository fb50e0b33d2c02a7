"""Registry of special forms for the minischeme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before evaluating the head of an
application, so these keywords cannot be shadowed by a `define`.
"""

from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.quote_form import quote_form
from minischeme.evaluation.special_forms.logic_forms import and_form, or_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
