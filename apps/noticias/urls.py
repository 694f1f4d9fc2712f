from django.urls import path
from rest_framework.routers import SimpleRouter
from . import views

urlpatterns = [
    # Artigos (mais-lidas antes do detalhe por slug)
    path('noticias/', views.ArticleListView.as_view(), name='noticias-list'),
    path('noticias/mais-lidas/', views.MostReadView.as_view(), name='noticias-mais-lidas'),
    path('noticias/<int:pk>/visualizacao/', views.ArticleViewRegisterView.as_view(), name='noticia-visualizacao'),
    path('noticias/<str:lookup>/', views.ArticleDetailView.as_view(), name='noticia-detail'),

    # Categorias
    path('categorias/', views.CategoriasListView.as_view(), name='categorias-list'),
    path('categorias/<slug:slug>/', views.CategoryDetailView.as_view(), name='categoria-detail'),

    # Busca e newsletter
    path('search/preview/', views.search_preview, name='search-preview'),
    path('newsletter/', views.NewsletterSubscribeView.as_view(), name='newsletter-subscribe'),
]

router = SimpleRouter()
router.register('articulos', views.ArticleAdminViewSet, basename='admin-articulos')
router.register('categorias', views.CategoryAdminViewSet, basename='admin-categorias')

# Montadas em /api/admin/
admin_urlpatterns = [
    path('imagens/', views.ImageUploadView.as_view(), name='admin-imagens'),
] + router.urls
