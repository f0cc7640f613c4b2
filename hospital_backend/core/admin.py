"""
Hospital backend - custom AdminSite & admin classes for users, roles and audit.
"""

from django.contrib import admin
from django.contrib.admin import AdminSite
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .models import AuditLog, Role, User


# ============================================================================
# Custom AdminSite
# ============================================================================
class HospitalAdminSite(AdminSite):
    """Admin site with a shortcut to the daily report screen."""
    site_header = "Hospital Management"
    site_title = "Hospital Admin"
    index_title = "System overview"
    site_url = None

    def get_app_list(self, request, app_label=None):
        """Prepend the report screens to the app list."""
        app_list = super().get_app_list(request, app_label)

        reports_app = {
            'name': 'Reports',
            'app_label': 'reports',
            'app_url': '/reports/daily/',
            'has_module_perms': True,
            'models': [
                {
                    'name': 'Daily Report Management',
                    'object_name': 'DailyReport',
                    'admin_url': '/reports/daily/',
                    'view_only': True,
                },
            ],
        }

        return [reports_app] + app_list


hospital_admin_site = HospitalAdminSite(name='admin')


# ============================================================================
# Role Admin
# ============================================================================
@admin.register(Role, site=hospital_admin_site)
class RoleAdmin(admin.ModelAdmin):

    list_display = ("name", "label", "user_count")
    search_fields = ("name", "label")
    ordering = ("name",)
    list_per_page = 50

    def user_count(self, obj):
        return obj.users.count()
    user_count.short_description = "Users"


# ============================================================================
# User Admin
# ============================================================================
@admin.register(User, site=hospital_admin_site)
class UserAdmin(DjangoUserAdmin):

    list_display = (
        "username",
        "email",
        "first_name",
        "last_name",
        "role_badge",
        "is_staff",
        "is_active",
    )
    list_filter = ("role", "is_staff", "is_active", "is_superuser")
    search_fields = ("username", "email", "first_name", "last_name")
    ordering = ("username",)
    list_per_page = 50

    fieldsets = (
        ("Authentication", {
            "fields": ("username", "password")
        }),
        ("Personal data", {
            "fields": ("first_name", "last_name", "email", "role")
        }),
        ("Permissions", {
            "fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions"),
            "classes": ("collapse",)
        }),
        ("Timestamps", {
            "fields": ("last_login", "date_joined"),
            "classes": ("collapse",)
        }),
    )

    add_fieldsets = (
        ("New user", {
            "classes": ("wide",),
            "fields": ("username", "password1", "password2", "email", "role", "first_name", "last_name"),
        }),
    )

    readonly_fields = ("last_login", "date_joined")

    def role_badge(self, obj):
        if not obj.role:
            return mark_safe('<span class="status-badge status-neutral">no role</span>')
        return format_html('<span class="status-badge">{}</span>', obj.role.label)
    role_badge.short_description = "Role"


# ============================================================================
# AuditLog Admin (read-only)
# ============================================================================
@admin.register(AuditLog, site=hospital_admin_site)
class AuditLogAdmin(admin.ModelAdmin):

    list_display = ("id", "timestamp", "user", "role_name", "action")
    list_filter = ("action", "role_name", "timestamp")
    search_fields = ("user__username", "action")
    ordering = ("-timestamp", "-id")
    list_per_page = 100
    date_hierarchy = "timestamp"

    readonly_fields = ("id", "user", "role_name", "action", "timestamp", "meta")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return request.user.is_superuser
