from django.contrib import admin
from .models import Client, Project, ManagerContact, Product


class ManagerContactInline(admin.TabularInline):
    model = ManagerContact
    extra = 0
    fields = ('name', 'email', 'phone')


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ('client_id', 'client_name', 'is_deleted')
    list_filter = ('is_deleted',)
    search_fields = ('client_name',)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('project_id', 'project_name', 'client', 'department', 'contract_period', 'is_deleted')
    list_filter = ('is_deleted', 'department')
    search_fields = ('project_name', 'client__client_name')
    list_select_related = ('client', 'department')
    inlines = [ManagerContactInline]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('product_id', 'product_type', 'product_name')
    list_filter = ('product_type',)
    search_fields = ('product_name',)
