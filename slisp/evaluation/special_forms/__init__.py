"""Registry of special forms for the slisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
"""

from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.quote_forms import quote_form
from slisp.evaluation.special_forms.if_form import if_form
from slisp.evaluation.special_forms.cond_form import cond_form
from slisp.evaluation.special_forms.define_form import define_form
from slisp.evaluation.special_forms.set_form import set_form
from slisp.evaluation.special_forms.lambda_form import lambda_form
from slisp.evaluation.special_forms.let_form import let_form
from slisp.evaluation.special_forms.progn_form import begin_form, module_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("begin"): begin_form,
    Symbol("module"): module_form,
}
