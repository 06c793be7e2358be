from django.contrib import admin

from .models import Cart, CartLine

# =====================================================
# CART LINE INLINE (READ-ONLY)
# =====================================================


class CartLineInline(admin.TabularInline):
    model = CartLine
    extra = 0
    can_delete = False
    readonly_fields = ("product", "quantity", "created_at")

    def has_add_permission(self, request, obj=None):
        return False


# =====================================================
# CART ADMIN (READ-ONLY: carts change through the API only)
# =====================================================


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "item_count", "total_amount", "updated_at")
    readonly_fields = ("id", "user_id", "created_at", "updated_at", "item_count", "total_amount")
    search_fields = ("user_id",)
    inlines = [CartLineInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
