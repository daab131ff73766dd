from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'name', 'latitude', 'longitude', 'updated_at']
    search_fields = ['user__email', 'name']
    readonly_fields = ['id', 'created_at', 'updated_at']
