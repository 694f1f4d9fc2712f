# portal_noticias/apps/authentication/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Modelo de usuário customizado do portal
    Login por e-mail; o papel (role) controla o acesso ao painel administrativo
    """

    ROLE_ADMIN = 'admin'
    ROLE_PUBLICISTA = 'publicista'

    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Administrador'),
        (ROLE_PUBLICISTA, 'Publicista'),
    ]

    # Campos básicos obrigatórios
    email = models.EmailField(
        unique=True,
        verbose_name="E-mail",
        help_text="E-mail único do usuário (usado para login)"
    )

    full_name = models.CharField(
        max_length=150,
        blank=True,
        verbose_name="Nome completo"
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_PUBLICISTA,
        verbose_name="Papel",
        help_text="Administradores gerenciam tudo; publicistas só editam rascunhos"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Criado em")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Atualizado em")

    # Configuração para usar email como campo de login
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        verbose_name = "Usuário"
        verbose_name_plural = "Usuários"
        db_table = 'profiles'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.email} ({self.get_role_display()})"

    def save(self, *args, **kwargs):
        """Administradores do portal também acessam o Django Admin"""
        if self.role == self.ROLE_ADMIN:
            self.is_staff = True
        if not self.full_name and self.email:
            self.full_name = self.email.split('@')[0]
        super().save(*args, **kwargs)

    @property
    def is_portal_admin(self):
        return self.role == self.ROLE_ADMIN

    @property
    def is_editor(self):
        return self.role in (self.ROLE_ADMIN, self.ROLE_PUBLICISTA)

    def can_modify_article(self, article):
        """Admin edita/exclui qualquer artigo; publicista só rascunhos"""
        if self.is_portal_admin:
            return True
        return self.role == self.ROLE_PUBLICISTA and article.is_draft
