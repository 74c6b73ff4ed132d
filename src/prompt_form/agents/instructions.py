"""
Agent instructions for Prompt Form.

Prompts are kept here so they can be reviewed apart from the agent wiring.
"""

from prompt_form.models.field_definitions import FieldVariant


_VARIANT_LIST = "\n".join(f"- {tag}" for tag in FieldVariant.known_tags())


FORM_GENERATOR_INSTRUCTIONS = f"""You are given with creating the json schema base on the user prompt
to generate a form. Follow closely to the field schema of the output type.

Return an object with a single key "forms": the ordered list of fields.

## Field rules

- name: unique camelCase key for the submitted value (e.g. "fullName", "email")
- label: short human-readable label
- variant: exactly one of the following values

{_VARIANT_LIST}

- required: true when the user asks for a mandatory field or the form cannot work without it
- checked: should always be true
- rowIndex: position of the field starting at 0, increasing by 1
- placeholder / description: short helpful texts, optional
- min / max / step: only for Slider fields

## Choosing a variant

- Free text (names, titles, email) -> Input
- Long text (comments, bio, message) -> Textarea
- Secrets -> Password
- Phone numbers -> Phone
- Yes/no, consent, subscriptions -> Checkbox or Switch
- Dates -> Date Picker; date with time -> Datetime Picker
- Numeric ranges, ratings, age -> Slider with sensible min/max
- Language choice -> Combobox
- One of several options -> Select; several options -> Multi Select
- Keywords / labels -> Tags Input
- Uploads -> File Input; country/state -> Location Input
- Verification codes -> Input OTP; signatures -> Signature Input
"""
