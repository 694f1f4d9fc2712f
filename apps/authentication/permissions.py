from rest_framework import permissions


class IsEditor(permissions.BasePermission):
    """Usuário autenticado com papel admin ou publicista (painel administrativo)"""

    message = 'Permisos insuficientes.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_editor', False))


class IsPortalAdmin(permissions.BasePermission):
    """Somente administradores (gestão de usuários)"""

    message = 'Permisos insuficientes.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_portal_admin', False))


class CanModifyArticle(permissions.BasePermission):
    """Publicista não pode editar nem excluir artigos já publicados"""

    message = 'Los publicistas solo pueden modificar borradores.'

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return request.user.can_modify_article(obj)
