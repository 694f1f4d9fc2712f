from rest_framework import serializers
from .models import Article, Category
from .utils.imagens import get_valid_image_url, get_category_placeholder


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'description', 'color']
        read_only_fields = ['slug']


class CategoryAdminSerializer(serializers.ModelSerializer):
    article_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'description', 'color', 'article_count', 'created_at']
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {'slug': {'required': False}}


class AuthorSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    full_name = serializers.CharField()


def display_image_for(article):
    if article.image_url:
        return get_valid_image_url(article.image_url)
    return get_category_placeholder(article.category.name if article.category_id else None)


class ArticleListSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)
    display_image_url = serializers.SerializerMethodField()

    class Meta:
        model = Article
        fields = [
            'id', 'title', 'slug', 'excerpt', 'image_url', 'display_image_url',
            'category', 'featured', 'views', 'published_at', 'created_at'
        ]

    def get_display_image_url(self, obj):
        return display_image_for(obj)


class ArticleDetailSerializer(ArticleListSerializer):
    author = AuthorSerializer(read_only=True)

    class Meta(ArticleListSerializer.Meta):
        fields = ArticleListSerializer.Meta.fields + ['content', 'author', 'updated_at']


class SearchPreviewSerializer(serializers.ModelSerializer):
    category = serializers.SerializerMethodField()

    class Meta:
        model = Article
        fields = ['id', 'title', 'slug', 'image_url', 'published_at', 'category']

    def get_category(self, obj):
        return {'name': obj.category.name, 'slug': obj.category.slug}


class ArticleAdminSerializer(serializers.ModelSerializer):
    """Criação/edição pelo painel; autor vem do usuário logado"""

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        error_messages={'required': 'La categoría es obligatoria.', 'null': 'La categoría es obligatoria.'}
    )
    author = AuthorSerializer(read_only=True)
    display_image_url = serializers.SerializerMethodField()

    class Meta:
        model = Article
        fields = [
            'id', 'title', 'slug', 'excerpt', 'content', 'status', 'category',
            'author', 'image_url', 'display_image_url', 'featured', 'views',
            'published_at', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'slug', 'views', 'created_at', 'updated_at']

    def get_display_image_url(self, obj):
        return display_image_for(obj)

    def validate_image_url(self, value):
        return value or None

    def validate_title(self, value):
        title = value.strip()
        if not title:
            raise serializers.ValidationError("El título es obligatorio.")
        return title


class NewsletterSubscribeSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={
        'invalid': 'Por favor ingresa un email válido.',
        'blank': 'Por favor ingresa un email válido.',
        'required': 'Por favor ingresa un email válido.',
    })
    source = serializers.CharField(required=False, max_length=50, default='website')


class ImageUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    folder = serializers.SlugField(required=False, max_length=50)
