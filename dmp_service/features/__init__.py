"""Feature packages.

Importing this package registers every feature's tables on ``Base.metadata``.
"""

from __future__ import annotations

from dmp_service.features.affiliations import models as affiliations_models
from dmp_service.features.contributors import models as contributors_models
from dmp_service.features.licenses import models as licenses_models
from dmp_service.features.metadata_standards import models as metadata_standards_models
from dmp_service.features.outputs import models as outputs_models
from dmp_service.features.projects import models as projects_models
from dmp_service.features.repositories import models as repositories_models
from dmp_service.features.research_domains import models as research_domains_models
from dmp_service.features.sections import models as sections_models
from dmp_service.features.templates import models as templates_models
from dmp_service.features.users import models as users_models

__all__ = [
    "affiliations_models",
    "contributors_models",
    "licenses_models",
    "metadata_standards_models",
    "outputs_models",
    "projects_models",
    "repositories_models",
    "research_domains_models",
    "sections_models",
    "templates_models",
    "users_models",
]
