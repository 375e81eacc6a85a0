"""Registry of special forms for the lis evaluator.

`SpecialForm` is the closed set of keywords. The evaluator checks a list's head
against it before anything else, so a keyword is never looked up in the
environment, even when a program has defined a variable of the same name.
"""

import enum

from lis.evaluation.special_forms.quote_form import quote_form
from lis.evaluation.special_forms.if_form import if_form
from lis.evaluation.special_forms.set_form import set_form
from lis.evaluation.special_forms.define_form import define_form
from lis.evaluation.special_forms.lambda_form import lambda_form
from lis.evaluation.special_forms.begin_form import begin_form


class SpecialForm(enum.Enum):
    QUOTE = "quote"
    IF = "if"
    SET = "set!"
    DEFINE = "define"
    LAMBDA = "lambda"
    BEGIN = "begin"


SPECIAL_FORMS = {
    SpecialForm.QUOTE: quote_form,
    SpecialForm.IF: if_form,
    SpecialForm.SET: set_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.BEGIN: begin_form,
}

KEYWORDS = {form.value: form for form in SpecialForm}
