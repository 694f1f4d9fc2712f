from urllib.parse import urlparse

from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.utils import timezone

from .models import Article, Category


class PortalSitemap(Sitemap):
    """URLs apontam para o site público (SITE_URL), não para o host da API"""

    def get_domain(self, site=None):
        return urlparse(settings.SITE_URL).netloc

    def get_protocol(self, protocol=None):
        return urlparse(settings.SITE_URL).scheme or 'https'


class StaticPagesSitemap(PortalSitemap):
    pages = {
        '/': ('hourly', 1.0),
        '/buscar': ('daily', 0.8),
        '/politica-privacidad': ('monthly', 0.3),
        '/terminos-uso': ('monthly', 0.3),
        '/aviso-legal': ('monthly', 0.3),
        '/codigo-etico': ('monthly', 0.3),
    }

    def items(self):
        return list(self.pages)

    def location(self, item):
        return item

    def changefreq(self, item):
        return self.pages[item][0]

    def priority(self, item):
        return self.pages[item][1]

    def lastmod(self, item):
        return timezone.now()


class ArticleSitemap(PortalSitemap):
    changefreq = 'daily'
    priority = 0.9

    def items(self):
        return Article.objects.published().order_by('-published_at')

    def location(self, item):
        return f'/articulos/{item.slug}'

    def lastmod(self, item):
        return item.updated_at


class CategorySitemap(PortalSitemap):
    changefreq = 'hourly'
    priority = 0.8

    def items(self):
        return Category.objects.all()

    def location(self, item):
        return f'/categoria/{item.slug}'


sitemaps = {
    'static': StaticPagesSitemap,
    'articles': ArticleSitemap,
    'categories': CategorySitemap,
}
