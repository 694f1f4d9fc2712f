from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.text import slugify


def unique_slug(model, value, instance_pk=None, max_length=255):
    """Slug a partir do texto; acrescenta -2, -3... se já existir"""
    base = slugify(value)[:max_length - 10] or 'sin-titulo'
    slug = base
    counter = 2
    queryset = model.objects.all()
    if instance_pk:
        queryset = queryset.exclude(pk=instance_pk)
    while queryset.filter(slug=slug).exists():
        slug = f"{base}-{counter}"
        counter += 1
    return slug


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True, verbose_name="Nome")
    slug = models.SlugField(max_length=120, unique=True, blank=True)
    description = models.TextField(blank=True, null=True, verbose_name="Descrição")
    color = models.CharField(max_length=20, blank=True, null=True, verbose_name="Cor")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Categoria"
        verbose_name_plural = "Categorias"
        db_table = 'categories'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Category, self.name, self.pk, max_length=120)
        super().save(*args, **kwargs)


class ArticleQuerySet(models.QuerySet):
    def published(self):
        """Publicados e com data de publicação já alcançada"""
        return self.filter(status=Article.STATUS_PUBLISHED, published_at__lte=timezone.now())


class Article(models.Model):
    STATUS_DRAFT = 'draft'
    STATUS_PUBLISHED = 'published'

    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Rascunho'),
        (STATUS_PUBLISHED, 'Publicado'),
    ]

    title = models.CharField(max_length=255, verbose_name="Título")
    content = models.TextField(verbose_name="Conteúdo (HTML)")
    excerpt = models.TextField(blank=True, null=True, verbose_name="Resumo")
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="articles", verbose_name="Categoria")
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name="articles", verbose_name="Autor"
    )
    image_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="Imagem")
    featured = models.BooleanField(default=False, verbose_name="Destaque")
    views = models.PositiveIntegerField(default=0, verbose_name="Visualizações")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    published_at = models.DateTimeField(blank=True, null=True, db_index=True, verbose_name="Publicado em")

    objects = ArticleQuerySet.as_manager()

    class Meta:
        verbose_name = "Artigo"
        verbose_name_plural = "Artigos"
        db_table = 'articles'
        ordering = ['-published_at', '-created_at']

    def __str__(self):
        return self.title

    @property
    def is_draft(self):
        return self.status == self.STATUS_DRAFT

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Article, self.title, self.pk)
        # Publicado sem data: usa o momento da publicação
        if self.is_published and self.published_at is None:
            self.published_at = timezone.now()
            update_fields = kwargs.get('update_fields')
            if update_fields is not None:
                kwargs['update_fields'] = set(update_fields) | {'published_at'}
        super().save(*args, **kwargs)


class NewsletterSubscriber(models.Model):
    STATUS_CHOICES = [
        ('active', 'Ativo'),
        ('unsubscribed', 'Cancelado'),
    ]

    email = models.EmailField(unique=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    source = models.CharField(max_length=50, default='website')
    confirmed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Assinante da newsletter"
        verbose_name_plural = "Assinantes da newsletter"
        db_table = 'newsletter_subscribers'
        ordering = ['-created_at']

    def __str__(self):
        return self.email
