from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AdSetting',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slot_id', models.CharField(choices=[('HOME_HEADER', 'Home - Cabeçalho'), ('HOME_SIDEBAR', 'Home - Barra lateral'), ('ARTICLE_TOP', 'Artigo - Topo'), ('ARTICLE_BOTTOM', 'Artigo - Rodapé')], max_length=50, unique=True, verbose_name='Espaço')),
                ('type', models.CharField(choices=[('adsense', 'Google AdSense'), ('custom', 'Personalizado')], default='adsense', max_length=20, verbose_name='Tipo')),
                ('custom_image_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='Imagem')),
                ('custom_link_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='Link')),
                ('custom_code', models.TextField(blank=True, null=True, verbose_name='Código HTML')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Configuração de anúncio',
                'verbose_name_plural': 'Configurações de anúncios',
                'db_table': 'ad_settings',
                'ordering': ['slot_id'],
            },
        ),
    ]
