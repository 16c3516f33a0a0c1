"""Restaurant API validation schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate

# Largest value a 64-bit integer column can hold
MAX_INTEGER = 2**63 - 1


class MenuSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    dish = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    price = fields.Decimal(places=2, as_string=True, allow_none=True)


class PaymentSchema(Schema):
    """Payment reference. Clients send only ``id``; ``type`` is filled in on output."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True, validate=validate.Range(min=1, max=MAX_INTEGER))
    type = fields.Str(dump_only=True)


class RestaurantSchema(Schema):
    class Meta:
        # Client-supplied ids and unrecognised keys are dropped on load
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    # Presence and blankness of the name are enforced by the service so that
    # PATCH can omit it
    name = fields.Str(required=True, allow_none=True, validate=validate.Length(max=100))
    address = fields.Str(allow_none=True, validate=validate.Length(max=200))
    city = fields.Str(allow_none=True, validate=validate.Length(max=100))
    state = fields.Str(allow_none=True, validate=validate.Length(max=20))
    telephone = fields.Str(allow_none=True, validate=validate.Length(max=30))
    seat_capacity = fields.Int(allow_none=True, validate=validate.Range(min=0, max=MAX_INTEGER))
    menus = fields.List(fields.Nested(MenuSchema), load_default=list)
    payments = fields.List(fields.Nested(PaymentSchema), load_default=list)


class MenuCountSchema(Schema):
    restaurant_id = fields.Int()
    name = fields.Str()
    count = fields.Int()
