from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.contrib.sitemaps.views import sitemap
from django.urls import include, path

from apps.authentication.urls import admin_urlpatterns as auth_admin_urls
from apps.dashboard.urls import admin_urlpatterns as dashboard_admin_urls
from apps.noticias.urls import admin_urlpatterns as noticias_admin_urls
from apps.noticias.sitemaps import sitemaps
from apps.noticias.views import robots_txt
from apps.publicidade.urls import admin_urlpatterns as publicidade_admin_urls
from apps.videos.urls import admin_urlpatterns as videos_admin_urls

# Rotas do painel (todas exigem papel de editor ou admin)
api_admin_urlpatterns = (
    auth_admin_urls
    + noticias_admin_urls
    + publicidade_admin_urls
    + videos_admin_urls
    + dashboard_admin_urls
)

urlpatterns = [
    path('admin/', admin.site.urls),

    # API
    path('api/auth/', include('apps.authentication.urls')),
    path('api/admin/', include(api_admin_urlpatterns)),
    path('api/', include('apps.dashboard.urls')),
    path('api/', include('apps.noticias.urls')),
    path('api/', include('apps.publicidade.urls')),
    path('api/', include('apps.videos.urls')),

    # SEO
    path('robots.txt', robots_txt, name='robots_txt'),
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps}, name='django.contrib.sitemaps.views.sitemap'),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

if 'debug_toolbar' in settings.INSTALLED_APPS:
    urlpatterns += [path('__debug__/', include('debug_toolbar.urls'))]
