from django.db import models


class AdSetting(models.Model):
    SLOT_HOME_HEADER = 'HOME_HEADER'
    SLOT_HOME_SIDEBAR = 'HOME_SIDEBAR'
    SLOT_ARTICLE_TOP = 'ARTICLE_TOP'
    SLOT_ARTICLE_BOTTOM = 'ARTICLE_BOTTOM'

    SLOT_CHOICES = [
        (SLOT_HOME_HEADER, 'Home - Cabeçalho'),
        (SLOT_HOME_SIDEBAR, 'Home - Barra lateral'),
        (SLOT_ARTICLE_TOP, 'Artigo - Topo'),
        (SLOT_ARTICLE_BOTTOM, 'Artigo - Rodapé'),
    ]

    TYPE_ADSENSE = 'adsense'
    TYPE_CUSTOM = 'custom'

    TYPE_CHOICES = [
        (TYPE_ADSENSE, 'Google AdSense'),
        (TYPE_CUSTOM, 'Personalizado'),
    ]

    slot_id = models.CharField(max_length=50, unique=True, choices=SLOT_CHOICES, verbose_name="Espaço")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_ADSENSE, verbose_name="Tipo")
    custom_image_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="Imagem")
    custom_link_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="Link")
    custom_code = models.TextField(blank=True, null=True, verbose_name="Código HTML")
    is_active = models.BooleanField(default=True, verbose_name="Ativo")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Configuração de anúncio"
        verbose_name_plural = "Configurações de anúncios"
        db_table = 'ad_settings'
        ordering = ['slot_id']

    def __str__(self):
        return f"{self.get_slot_id_display()} ({self.get_type_display()})"

    @classmethod
    def slot_keys(cls):
        return [key for key, _ in cls.SLOT_CHOICES]
