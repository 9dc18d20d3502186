"""Registry of special forms for the sublisp evaluator.

Maps atoms to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary application. Lambda
literals are recognized structurally (see lambda_form) rather than by name.
"""

from sublisp.types.atom import Atom
from sublisp.evaluation.special_forms.quote_form import quote_form
from sublisp.evaluation.special_forms.define_form import define_form
from sublisp.evaluation.special_forms.if_form import if_form

QUOTE = Atom("quote")

SPECIAL_FORMS = {
    Atom("if"): if_form,
    Atom("def"): define_form,
    QUOTE: quote_form,
}
