from django.contrib import admin

from .models import Receipt, ReceiptItem

# =====================================================
# RECEIPT ITEM INLINE (READ-ONLY)
# =====================================================


class ReceiptItemInline(admin.TabularInline):
    model = ReceiptItem
    extra = 0
    can_delete = False
    readonly_fields = ("product_id", "name", "unit_price", "quantity", "line_total")

    def has_add_permission(self, request, obj=None):
        return False


# =====================================================
# RECEIPT ADMIN (APPEND-ONLY ARCHIVE)
# =====================================================


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "customer_name", "customer_email", "total", "created_at")
    readonly_fields = ("id", "user_id", "customer_name", "customer_email", "total", "created_at")
    search_fields = ("customer_name", "customer_email")
    list_filter = ("created_at",)
    inlines = [ReceiptItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
