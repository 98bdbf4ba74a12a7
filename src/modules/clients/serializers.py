"""Client DRF serializer for API output.

Renders a ``ClientDTO`` (read-only); also feeds the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers


class ClientSerializer(serializers.Serializer):
    """Read-only representation of a full client record."""

    document_type = serializers.CharField(read_only=True)
    document_number = serializers.IntegerField(read_only=True)
    first_name = serializers.CharField(read_only=True)
    middle_name = serializers.CharField(read_only=True)
    last_name = serializers.CharField(read_only=True)
    second_last_name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    city = serializers.CharField(read_only=True)
