from django.urls import path
from . import views

urlpatterns = [
    path('anuncios/', views.AdSlotsView.as_view(), name='anuncios'),
    path('anuncios/<str:slot_key>/', views.AdSlotDetailView.as_view(), name='anuncio-detail'),
]

# Montadas em /api/admin/
admin_urlpatterns = [
    path('anuncios/', views.AdSettingsAdminView.as_view(), name='admin-anuncios'),
    path('anuncios/<str:slot_key>/', views.AdSettingUpsertView.as_view(), name='admin-anuncio-upsert'),
]
