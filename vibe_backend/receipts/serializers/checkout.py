# receipts/serializers/checkout.py

from rest_framework import serializers


class CheckoutInputSerializer(serializers.Serializer):
    """
    Transport shape only. Presence/emptiness of name and email is a
    checkout rule (ValidationFailedError), not a serializer rule.
    """

    name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    email = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
