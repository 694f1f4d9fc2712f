from django.urls import path
from . import views

urlpatterns = [
    path('videos/ao-vivo/', views.CurrentLiveVideoView.as_view(), name='video-ao-vivo'),
    path('videos/<int:pk>/', views.LiveVideoDetailView.as_view(), name='video-detail'),
]

# Montadas em /api/admin/
admin_urlpatterns = [
    path('videos/', views.LiveVideoAdminListView.as_view(), name='admin-videos'),
    path('videos/desabilitar-todos/', views.LiveVideoDisableAllView.as_view(), name='admin-videos-desabilitar'),
    path('videos/<int:pk>/', views.LiveVideoAdminDetailView.as_view(), name='admin-video-detail'),
    path('videos/<int:pk>/habilitar/', views.LiveVideoEnableView.as_view(), name='admin-video-habilitar'),
]
