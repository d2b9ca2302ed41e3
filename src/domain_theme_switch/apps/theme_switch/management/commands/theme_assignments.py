from django.core.management.base import BaseCommand

from ...application.services import get_theme_switch_service


class Command(BaseCommand):
    help = 'Show the site and admin theme in effect for every domain'

    def handle(self, *args, **options):
        svc = get_theme_switch_service()
        domains = svc.domain_directory.list_all()

        if not domains:
            # Same list as the check above
            self.stdout.write(self.style.WARNING(svc.build_view(domains).message.plain_text()))
            return

        for domain, assignment in zip(domains, svc.get_assignments(domains)):
            self.stdout.write(
                f"{domain.id} ({domain.hostname}): "
                f"site={assignment.site_theme} admin={assignment.admin_theme}"
            )

        self.stdout.write(self.style.SUCCESS(f"{len(domains)} domain(s) listed"))
