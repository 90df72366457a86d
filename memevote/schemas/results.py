from marshmallow import fields

from ..extensions import ma


class ChoiceCountSchema(ma.Schema):
    choice_id = fields.Str(required=True, data_key="_id")
    count = fields.Int(required=True)


class VoteLogEntrySchema(ma.Schema):
    email = fields.Str(required=True)
    choice_id = fields.Str(required=True, data_key="memeId")
    timestamp = fields.DateTime(required=True)


class ResultsSchema(ma.Schema):
    total_votes = fields.Int(required=True, data_key="totalVotes")
    counts_by_choice = fields.List(fields.Nested(ChoiceCountSchema), required=True, data_key="voteCounts")
    all_votes = fields.List(fields.Nested(VoteLogEntrySchema), required=True, data_key="allVotes")
