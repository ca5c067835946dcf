from django.contrib import admin
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(admin.ModelAdmin):
    list_display = ["username", "email", "user_type", "date_joined"]
    list_filter = ["user_type", "date_joined"]
    search_fields = ["username", "email"]
