from django.contrib import admin
from .models import Match, Swipe


@admin.register(Swipe)
class SwipeAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'trail', 'direction', 'created_at']
    list_filter = ['direction', 'created_at']
    search_fields = ['user__email', 'trail__name']
    readonly_fields = ['id', 'created_at']


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = ['id', 'user1', 'user2', 'trail', 'created_at']
    search_fields = ['user1__email', 'user2__email', 'trail__name']
    readonly_fields = ['id', 'created_at']
