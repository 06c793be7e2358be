# receipts/filters.py

import django_filters

from receipts.models import Receipt


class ReceiptFilter(django_filters.FilterSet):
    created_after = django_filters.IsoDateTimeFilter(field_name="created_at", lookup_expr="gte")
    created_before = django_filters.IsoDateTimeFilter(field_name="created_at", lookup_expr="lte")
    email = django_filters.CharFilter(field_name="customer_email", lookup_expr="iexact")

    class Meta:
        model = Receipt
        fields = ["created_after", "created_before", "email"]
