from marshmallow import fields, validate, pre_load, post_load, EXCLUDE

from ..extensions import ma

# local@domain.tld with no whitespace, checked after trimming
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class VoteSubmitSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Str(
        required=True,
        validate=validate.Regexp(EMAIL_PATTERN, error="Not a valid email address."),
    )
    choice_id = fields.Str(
        required=True,
        data_key="choiceId",
        validate=validate.Length(min=1),
    )

    @pre_load
    def strip_input(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        # Older clients post the choice as "memeId"
        if "choiceId" not in data and "memeId" in data:
            data["choiceId"] = data.pop("memeId")
        for key in ("email", "choiceId"):
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()
        return data

    @post_load
    def lowercase_email(self, data, **kwargs):
        data["email"] = data["email"].lower()
        return data


class VoteReceiptSchema(ma.Schema):
    message = fields.Str(required=True)
