from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

urlpatterns = [
    # Saúde da API
    path('health/', views.health_check, name='auth_health'),

    # Autenticação
    path('login/', views.CustomTokenObtainPairView.as_view(), name='login'),
    path('refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('logout/', views.LogoutView.as_view(), name='logout'),

    # Perfil do usuário
    path('profile/', views.UserProfileView.as_view(), name='profile'),
]

# Montadas em /api/admin/
admin_urlpatterns = [
    path('users/', views.AdminUserListView.as_view(), name='admin_users'),
    path('create-user/', views.AdminCreateUserView.as_view(), name='admin_create_user'),
    path('update-user-role/', views.AdminUpdateUserRoleView.as_view(), name='admin_update_user_role'),
    path('delete-user/', views.AdminDeleteUserView.as_view(), name='admin_delete_user'),
]
