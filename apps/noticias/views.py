from rest_framework import generics, filters, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import JSONParser, MultiPartParser, FormParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from django.conf import settings
from django.db.models import Count, ProtectedError
from django.http import Http404, HttpResponse
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from kombu.exceptions import OperationalError

import logging

from apps.authentication.permissions import IsEditor, CanModifyArticle
from .models import Article, Category
from .serializers import (
    ArticleListSerializer, ArticleDetailSerializer, ArticleAdminSerializer,
    CategorySerializer, CategoryAdminSerializer, SearchPreviewSerializer,
    NewsletterSubscribeSerializer, ImageUploadSerializer,
)
from .services import increment_article_views, subscribe_newsletter, upload_image, delete_image
from .tasks import incrementar_visualizacoes_task

logger = logging.getLogger(__name__)

VIEWED_ARTICLES_SESSION_KEY = 'artigos_vistos'


class ArticleListView(generics.ListAPIView):
    """
    Feed público: home, filtro por categoria e busca
    GET /api/noticias/?q=&category__slug=&featured=&ordem=
    """
    serializer_class = ArticleListSerializer
    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]

    # Filtragem
    filterset_fields = ['category__slug', 'featured']
    search_fields = ['title', 'excerpt', 'content']
    ordering_fields = ['published_at', 'views', 'title']
    ordering = ['-published_at']

    def get_queryset(self):
        return Article.objects.published().select_related('category')


class ArticleDetailView(generics.RetrieveAPIView):
    """
    Artigo publicado por id ou slug, com até 4 relacionados da mesma categoria
    GET /api/noticias/<id-ou-slug>/
    """
    serializer_class = ArticleDetailSerializer
    permission_classes = [AllowAny]

    def get_object(self):
        lookup = self.kwargs['lookup']
        queryset = Article.objects.published().select_related('category', 'author')
        if lookup.isdigit():
            # Slug só de dígitos (ex.: "2024") também é válido
            article = queryset.filter(pk=int(lookup)).first()
            if article is not None:
                return article
        return get_object_or_404(queryset, slug=lookup)

    def retrieve(self, request, *args, **kwargs):
        article = self.get_object()
        related = (
            Article.objects.published()
            .filter(category_id=article.category_id)
            .exclude(pk=article.pk)
            .select_related('category')
            .order_by('-published_at')[:settings.RELATED_ARTICLES_LIMIT]
        )
        return Response({
            'article': self.get_serializer(article).data,
            'related': ArticleListSerializer(related, many=True).data,
        })


class MostReadView(generics.ListAPIView):
    """
    Mais lidas
    GET /api/noticias/mais-lidas/?limit=5
    """
    serializer_class = ArticleListSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        try:
            limit = int(self.request.query_params.get('limit', settings.MOST_READ_LIMIT))
        except ValueError:
            limit = settings.MOST_READ_LIMIT
        limit = max(1, min(limit, 20))
        return Article.objects.published().select_related('category').order_by('-views', '-published_at')[:limit]


class ArticleViewRegisterView(APIView):
    """
    Registra uma visita ao artigo (uma por sessão do navegador)
    POST /api/noticias/<pk>/visualizacao/
    """
    permission_classes = [AllowAny]

    def post(self, request, pk):
        if not Article.objects.published().filter(pk=pk).exists():
            raise Http404

        viewed = request.session.get(VIEWED_ARTICLES_SESSION_KEY, [])
        if pk in viewed:
            return Response({'success': True, 'counted': False})

        try:
            incrementar_visualizacoes_task.delay(pk)
        except OperationalError as e:
            logger.warning(f"Broker indisponível, registrando visita direto: {str(e)}")
            increment_article_views(pk)

        viewed.append(pk)
        request.session[VIEWED_ARTICLES_SESSION_KEY] = viewed
        return Response({'success': True, 'counted': True})


class CategoriasListView(generics.ListAPIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        categorias = Category.objects.all().order_by('name')
        return Response({
            "results": CategorySerializer(categorias, many=True).data
        })


class CategoryDetailView(APIView):
    """
    Página de categoria: dados da categoria + últimos 20 artigos
    GET /api/categorias/<slug>/
    """
    permission_classes = [AllowAny]

    def get(self, request, slug):
        category = Category.objects.filter(slug=slug).first()
        if category is None:
            logger.warning(f"Categoria não encontrada para o slug: {slug}")
            return Response({
                'success': False,
                'message': 'Categoría no encontrada.'
            }, status=status.HTTP_404_NOT_FOUND)

        articles = (
            Article.objects.published()
            .filter(category=category)
            .select_related('category')
            .order_by('-published_at')[:settings.CATEGORY_ARTICLES_LIMIT]
        )
        return Response({
            'category': CategorySerializer(category).data,
            'articles': ArticleListSerializer(articles, many=True).data,
        })


@api_view(['GET'])
@permission_classes([AllowAny])
def search_preview(request):
    """
    Busca enquanto digita (títulos publicados)
    GET /api/search/preview/?q=
    """
    query = request.GET.get('q', '').strip()
    if len(query) < 2:
        return Response({'results': []})

    articles = (
        Article.objects.published()
        .filter(title__icontains=query)
        .select_related('category')
        .order_by('-published_at')[:settings.SEARCH_PREVIEW_LIMIT]
    )
    return Response({'results': SearchPreviewSerializer(articles, many=True).data})


class NewsletterSubscribeView(APIView):
    """
    Inscrição na newsletter
    POST /api/newsletter/
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = NewsletterSubscribeSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Por favor ingresa un email válido.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        result = subscribe_newsletter(
            serializer.validated_data['email'],
            source=serializer.validated_data['source'],
        )
        if not result.success:
            return result.error_response()

        return Response({
            'success': True,
            'message': '¡Gracias! Te has suscrito exitosamente a nuestro boletín.'
        }, status=status.HTTP_201_CREATED)


def robots_txt(request):
    """robots.txt: bloqueia painel, API e autenticação"""
    lines = []
    for user_agent in ('*', 'Googlebot', 'Bingbot'):
        lines += [
            f'User-agent: {user_agent}',
            'Allow: /',
            'Disallow: /admin/',
            'Disallow: /api/',
            'Disallow: /auth/',
            '',
        ]
    lines.append(f"Sitemap: {settings.SITE_URL.rstrip('/')}/sitemap.xml")
    return HttpResponse('\n'.join(lines) + '\n', content_type='text/plain')


# ===== Painel administrativo =====

class ArticleAdminViewSet(viewsets.ModelViewSet):
    """
    CRUD de artigos do painel
    /api/admin/articulos/
    """
    serializer_class = ArticleAdminSerializer
    permission_classes = [IsEditor, CanModifyArticle]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['status', 'category', 'featured']
    search_fields = ['title', 'excerpt']
    ordering_fields = ['created_at', 'published_at', 'views', 'title']
    ordering = ['-created_at']

    def get_queryset(self):
        return Article.objects.select_related('category', 'author')

    def perform_create(self, serializer):
        article = serializer.save(author=self.request.user)
        logger.info(f"Artigo criado por {self.request.user.email}: {article.title} ({article.status})")

    def perform_update(self, serializer):
        article = serializer.save()
        logger.info(f"Artigo {article.pk} atualizado por {self.request.user.email}")

    def perform_destroy(self, instance):
        logger.info(f"Artigo {instance.pk} excluído por {self.request.user.email}")
        instance.delete()


class CategoryAdminViewSet(viewsets.ModelViewSet):
    """
    CRUD de categorias com contagem de artigos
    /api/admin/categorias/
    """
    serializer_class = CategoryAdminSerializer
    permission_classes = [IsEditor]
    pagination_class = None

    def get_queryset(self):
        return Category.objects.annotate(article_count=Count('articles')).order_by('name')

    def destroy(self, request, *args, **kwargs):
        category = self.get_object()
        try:
            category.delete()
        except ProtectedError:
            return Response({
                'success': False,
                'message': 'No se puede eliminar una categoría con artículos.',
                'error_kind': 'conflict'
            }, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ImageUploadView(APIView):
    """
    Upload de imagens do editor
    POST /api/admin/imagens/ (multipart: file, folder?)
    DELETE /api/admin/imagens/ {"path": "..."}
    """
    permission_classes = [IsEditor]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        serializer = ImageUploadSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Archivo requerido.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        result = upload_image(serializer.validated_data['file'], serializer.validated_data.get('folder'))
        if not result.success:
            return result.error_response()

        return Response({
            'success': True,
            'path': result.data['path'],
            'url': request.build_absolute_uri(result.data['url']),
        }, status=status.HTTP_201_CREATED)

    def delete(self, request):
        path = request.data.get('path', '')
        if not delete_image(path):
            return Response({
                'success': False,
                'message': 'Imagen no encontrada.'
            }, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True})
