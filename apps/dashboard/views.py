# apps/dashboard/views.py
from datetime import timedelta

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import connection, DatabaseError
from django.db.models import Sum
from django.utils import timezone
import django
import logging

from apps.authentication.permissions import IsEditor
from apps.noticias.models import Article

logger = logging.getLogger(__name__)


def change_percentage(current, previous):
    """Variação percentual arredondada; 0 quando não há base de comparação"""
    if not previous:
        return 0
    return round((current - previous) / previous * 100)


@api_view(['GET'])
@permission_classes([AllowAny])
def backend_status(request):
    """
    Endpoint para verificar status do backend Django
    GET /api/status/
    """
    try:
        # Teste de conexão com o banco
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        db_status = "connected"
    except DatabaseError as e:
        logger.error(f"Banco indisponível: {str(e)}")
        db_status = "error"

    return Response({
        "success": True,
        "message": "Portal de Noticias Backend Online",
        "data": {
            "backend_status": "online",
            "database_status": db_status,
            "django_version": django.get_version(),
            "apps": ["authentication", "dashboard", "noticias", "publicidade", "videos"]
        }
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsEditor])
def admin_statistics(request):
    """
    Números do painel
    GET /api/admin/estatisticas/
    """
    now = timezone.now()
    one_month_ago = now - timedelta(days=30)
    one_week_ago = now - timedelta(days=7)

    articles = Article.objects.all()
    total = articles.count()
    published = articles.filter(status=Article.STATUS_PUBLISHED).count()
    drafts = articles.filter(status=Article.STATUS_DRAFT).count()

    # Base de comparação: o que já existia há um mês / uma semana
    total_last_month = articles.filter(created_at__lt=one_month_ago).count()
    published_last_week = articles.filter(
        status=Article.STATUS_PUBLISHED, created_at__lt=one_week_ago
    ).count()

    total_views = articles.aggregate(total=Sum('views'))['total'] or 0

    recent = articles.order_by('-created_at').values('id', 'title', 'status', 'created_at')[:5]

    return Response({
        "success": True,
        "data": {
            "total_articles": total,
            "published_articles": published,
            "draft_articles": drafts,
            "total_change_month": change_percentage(total, total_last_month),
            "published_change_week": change_percentage(published, published_last_week),
            "total_views": total_views,
            "recent_articles": list(recent),
        }
    })
