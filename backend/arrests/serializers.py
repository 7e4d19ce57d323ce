"""
Arrests app serializers.

The registration endpoint reads its body directly in the service so the
required-field check can report every missing wire name in one message.
These serializers document the request/response shapes for the schema.
"""

from rest_framework import serializers


class ArrestRegistrationRequestSerializer(serializers.Serializer):
    personID = serializers.CharField(help_text="Existing Person ID, e.g. 'PER-001'.")
    caseID = serializers.CharField(help_text="Existing Case ID whose status is 'open' (any casing).")
    arrestDate = serializers.CharField(
        help_text="Date string, ISO datetime or epoch milliseconds; the time of day is dropped.",
    )
    locationID = serializers.CharField(help_text="Existing Location ID.")
    chargeDescription = serializers.CharField()
    statuteCode = serializers.CharField()
    isConvicted = serializers.BooleanField(required=False, default=False)
    officerID = serializers.CharField(required=False, allow_null=True)


class RegisteredArrestSerializer(serializers.Serializer):
    arrest = serializers.DictField()
    charge = serializers.DictField()


class ArrestRegistrationResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    data = RegisteredArrestSerializer()


class ArrestRegistrationErrorSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    error = serializers.CharField()
    details = serializers.CharField(required=False)
