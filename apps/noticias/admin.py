from django.contrib import admin, messages
from django.utils import timezone
from django.utils.html import format_html

from .models import Article, Category, NewsletterSubscriber
from .utils.imagens import get_valid_image_url


def publicar_artigos(modeladmin, request, queryset):
    count = 0
    for article in queryset.filter(status=Article.STATUS_DRAFT):
        article.status = Article.STATUS_PUBLISHED
        # save() preenche published_at quando vazio
        article.save()
        count += 1
    messages.info(request, f'{count} artigo(s) publicado(s)')

publicar_artigos.short_description = "Publicar artigos selecionados"


def voltar_para_rascunho(modeladmin, request, queryset):
    count = queryset.filter(status=Article.STATUS_PUBLISHED).update(
        status=Article.STATUS_DRAFT, updated_at=timezone.now()
    )
    messages.info(request, f'{count} artigo(s) movido(s) para rascunho')

voltar_para_rascunho.short_description = "Voltar para rascunho"


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "cor", "total_artigos", "created_at")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    ordering = ("name",)

    def cor(self, obj):
        if not obj.color:
            return ""
        return format_html(
            '<span style="display:inline-block;width:12px;height:12px;background:{}"></span> {}',
            obj.color, obj.color
        )
    cor.short_description = "Cor"

    def total_artigos(self, obj):
        return obj.articles.count()
    total_artigos.short_description = "Artigos"


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "author", "status", "featured", "views", "published_at", "imagem")
    list_filter = ("status", "featured", "category", "published_at")
    search_fields = ("title", "excerpt", "content")
    date_hierarchy = "published_at"
    ordering = ("-created_at",)
    readonly_fields = ("views", "created_at", "updated_at")
    raw_id_fields = ("author",)
    actions = [publicar_artigos, voltar_para_rascunho]

    def imagem(self, obj):
        if not obj.image_url:
            return ""
        return format_html('<a href="{}" target="_blank">Ver</a>', get_valid_image_url(obj.image_url))
    imagem.short_description = "Imagem"

    def save_model(self, request, obj, form, change):
        if not change and obj.author_id is None:
            obj.author = request.user
        super().save_model(request, obj, form, change)


@admin.register(NewsletterSubscriber)
class NewsletterSubscriberAdmin(admin.ModelAdmin):
    list_display = ("email", "status", "source", "confirmed_at", "created_at")
    list_filter = ("status", "source", "created_at")
    search_fields = ("email",)
    ordering = ("-created_at",)
