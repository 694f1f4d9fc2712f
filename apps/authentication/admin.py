from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Interface administrativa personalizada para o modelo User
    """

    # Campos exibidos na lista de usuários
    list_display = [
        'email', 'full_name', 'role_badge', 'is_active', 'created_at', 'last_login'
    ]

    # Filtros laterais
    list_filter = ['role', 'is_active', 'is_staff', 'created_at', 'last_login']

    # Campos de busca
    search_fields = ['email', 'full_name', 'username']

    # Ordenação padrão
    ordering = ['-created_at']

    # Campos somente leitura
    readonly_fields = ['created_at', 'updated_at', 'last_login', 'date_joined']

    # Configuração dos fieldsets (seções no formulário de edição)
    fieldsets = (
        ('Informações Básicas', {
            'fields': ('email', 'username', 'full_name', 'password')
        }),
        ('Status da Conta', {
            'fields': ('is_active', 'role')
        }),
        ('Permissões', {
            'fields': ('is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',)
        }),
        ('Datas', {
            'fields': ('last_login', 'date_joined', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    # Campos para criação de novo usuário
    add_fieldsets = (
        ('Criar Usuário', {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2', 'full_name', 'role'),
        }),
    )

    actions = ['promote_to_admin', 'demote_to_publicista']

    def role_badge(self, obj):
        color = '#b91c1c' if obj.role == User.ROLE_ADMIN else '#1d4ed8'
        return format_html('<span style="color: {};">{}</span>', color, obj.get_role_display())
    role_badge.short_description = 'Papel'

    def promote_to_admin(self, request, queryset):
        count = 0
        for user in queryset.exclude(role=User.ROLE_ADMIN):
            user.role = User.ROLE_ADMIN
            user.save()
            count += 1
        self.message_user(request, f'{count} usuários foram promovidos a administrador.')
    promote_to_admin.short_description = "Promover a administrador"

    def demote_to_publicista(self, request, queryset):
        """Rebaixa para publicista, nunca o próprio usuário logado"""
        count = queryset.exclude(pk=request.user.pk).exclude(role=User.ROLE_PUBLICISTA).update(
            role=User.ROLE_PUBLICISTA, is_staff=False
        )
        self.message_user(request, f'{count} usuários agora são publicistas.')
    demote_to_publicista.short_description = "Rebaixar a publicista"


# Configurações adicionais do Admin
admin.site.site_header = "Las Informaciones con Leyni - Administración"
admin.site.site_title = "Las Informaciones con Leyni"
admin.site.index_title = "Painel de Administração"
