from django.contrib import admin
from .models import Trail, TrailPhoto


class TrailPhotoInline(admin.TabularInline):
    model = TrailPhoto
    extra = 0
    readonly_fields = ['id', 'created_at']


@admin.register(Trail)
class TrailAdmin(admin.ModelAdmin):
    list_display = ['name', 'difficulty', 'distance', 'elevation', 'created_at']
    list_filter = ['difficulty', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [TrailPhotoInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'description')
        }),
        ('Location', {
            'fields': ('latitude', 'longitude')
        }),
        ('Classification', {
            'fields': ('difficulty', 'distance', 'elevation', 'tags')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
