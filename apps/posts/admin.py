from django.contrib import admin

from .models import Post, PostComment


class PostCommentInline(admin.TabularInline):
    model = PostComment
    extra = 0
    fields = ('user', 'text', 'created_at')
    readonly_fields = ('created_at',)
    raw_id_fields = ('user',)


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ('name', 'short_text', 'like_count', 'created_at')
    search_fields = ('text', 'name', 'user__email')
    readonly_fields = ('id', 'name', 'avatar', 'created_at', 'updated_at')
    raw_id_fields = ('user',)
    filter_horizontal = ('likes',)
    inlines = [PostCommentInline]

    @admin.display(description='Text')
    def short_text(self, obj):
        return obj.text[:80]
