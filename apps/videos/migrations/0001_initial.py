import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='LiveVideo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Título')),
                ('youtube_url', models.URLField(max_length=500, verbose_name='URL do YouTube')),
                ('youtube_video_id', models.CharField(editable=False, max_length=64, verbose_name='ID do vídeo')),
                ('description', models.TextField(blank=True, default='', verbose_name='Descrição')),
                ('is_live', models.BooleanField(default=False, verbose_name='Ao vivo')),
                ('is_enabled', models.BooleanField(default=False, verbose_name='Habilitado')),
                ('thumbnail_url', models.URLField(blank=True, editable=False, max_length=500, verbose_name='Miniatura')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='live_videos', to=settings.AUTH_USER_MODEL, verbose_name='Criado por')),
            ],
            options={
                'verbose_name': 'Vídeo ao vivo',
                'verbose_name_plural': 'Vídeos ao vivo',
                'db_table': 'live_videos',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='livevideo',
            constraint=models.UniqueConstraint(condition=models.Q(('is_enabled', True)), fields=('is_enabled',), name='live_videos_single_enabled'),
        ),
    ]
