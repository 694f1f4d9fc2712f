from rest_framework import status, permissions
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.decorators import api_view, permission_classes
from django.db import DatabaseError, transaction
from rest_framework_simplejwt.views import TokenObtainPairView
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError

import logging

from .models import User
from .permissions import IsEditor, IsPortalAdmin
from .serializers import (
    CustomTokenObtainPairSerializer, UserSerializer, CreateUserSerializer,
    UpdateUserRoleSerializer, DeleteUserSerializer, LogoutSerializer,
)

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health_check(request):
    """
    Endpoint de saúde da API
    GET /api/auth/health/
    """
    return Response({'status': 'ok'})


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    View de login customizada (JWT) - só admin/publicista entram no painel
    POST /api/auth/login/
    """
    serializer_class = CustomTokenObtainPairSerializer


class LogoutView(APIView):
    """
    Logout do usuário: invalida o refresh token
    POST /api/auth/logout/
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Token de actualización requerido.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)
        try:
            RefreshToken(serializer.validated_data['refresh']).blacklist()
        except TokenError as e:
            logger.info(f"Logout com token inválido: {str(e)}")
            return Response({
                'success': False,
                'message': 'Token inválido o expirado.'
            }, status=status.HTTP_400_BAD_REQUEST)
        return Response({'success': True, 'message': 'Sesión cerrada correctamente.'})


class UserProfileView(APIView):
    """
    Dados do usuário logado
    GET /api/auth/profile/
    """
    permission_classes = [IsEditor]

    def get(self, request):
        return Response({'success': True, 'user': UserSerializer(request.user).data})


class AdminUserListView(APIView):
    """
    Lista de usuários do painel
    GET /api/admin/users/
    """
    permission_classes = [IsPortalAdmin]

    def get(self, request):
        users = User.objects.all().order_by('-created_at')
        return Response({'users': UserSerializer(users, many=True).data})


class AdminCreateUserView(APIView):
    """
    Cria usuário já confirmado com papel definido
    POST /api/admin/create-user/
    """
    permission_classes = [IsPortalAdmin]

    def post(self, request):
        serializer = CreateUserSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Datos inválidos.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)
        try:
            with transaction.atomic():
                user = serializer.save()
        except DatabaseError as e:
            logger.error(f"Erro ao criar usuário: {str(e)}")
            return Response({
                'success': False,
                'message': 'Error interno del servidor.'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Usuário criado por {request.user.email}: {user.email} ({user.role})")
        return Response({
            'success': True,
            'user': UserSerializer(user).data
        }, status=status.HTTP_201_CREATED)


class AdminUpdateUserRoleView(APIView):
    """
    Altera o papel de um usuário
    POST /api/admin/update-user-role/
    """
    permission_classes = [IsPortalAdmin]

    def post(self, request):
        serializer = UpdateUserRoleSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'user_id y role son requeridos.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        user_id = serializer.validated_data['user_id']
        role = serializer.validated_data['role']

        # Um admin não pode retirar as próprias permissões
        if user_id == request.user.id and role != User.ROLE_ADMIN:
            return Response({
                'success': False,
                'message': 'No puedes cambiar tu propio rol de administrador.'
            }, status=status.HTTP_400_BAD_REQUEST)

        try:
            user = User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return Response({
                'success': False,
                'message': 'Usuario no encontrado.'
            }, status=status.HTTP_404_NOT_FOUND)

        user.role = role
        if role != User.ROLE_ADMIN and not user.is_superuser:
            user.is_staff = False
        user.save(update_fields=['role', 'is_staff', 'updated_at'])
        logger.info(f"Papel de {user.email} alterado para {role} por {request.user.email}")
        return Response({'success': True, 'user': UserSerializer(user).data})


class AdminDeleteUserView(APIView):
    """
    Exclui um usuário do painel
    POST /api/admin/delete-user/
    """
    permission_classes = [IsPortalAdmin]

    def post(self, request):
        serializer = DeleteUserSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'user_id es requerido.',
                'errors': serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        user_id = serializer.validated_data['user_id']
        if user_id == request.user.id:
            return Response({
                'success': False,
                'message': 'No puedes eliminar tu propia cuenta.'
            }, status=status.HTTP_400_BAD_REQUEST)

        deleted, _ = User.objects.filter(pk=user_id).delete()
        if not deleted:
            return Response({
                'success': False,
                'message': 'Usuario no encontrado.'
            }, status=status.HTTP_404_NOT_FOUND)

        logger.info(f"Usuário {user_id} excluído por {request.user.email}")
        return Response({'success': True})
