"""Thematic tag catalog: seed rows and keyword lists per slug."""

THEMATIC_TAGS = [
    {
        "slug": "sante",
        "label": "Santé",
        "keywords": [
            "santé",
            "hôpital",
            "médecin",
            "médicament",
            "sécurité sociale",
            "assurance maladie",
            "soins",
            "fin de vie",
            "vaccin",
            "pharmacie",
        ],
    },
    {
        "slug": "education",
        "label": "Éducation",
        "keywords": [
            "éducation",
            "école",
            "enseignement",
            "élève",
            "université",
            "lycée",
            "collège",
            "formation professionnelle",
            "apprentissage",
        ],
    },
    {
        "slug": "environnement",
        "label": "Environnement",
        "keywords": [
            "environnement",
            "climat",
            "biodiversité",
            "énergie",
            "renouvelable",
            "pollution",
            "transition écologique",
            "eau",
            "déchets",
            "nucléaire",
        ],
    },
    {
        "slug": "economie",
        "label": "Économie",
        "keywords": [
            "économie",
            "entreprise",
            "commerce",
            "industrie",
            "croissance",
            "concurrence",
            "consommation",
            "pouvoir d'achat",
        ],
    },
    {
        "slug": "budget-fiscalite",
        "label": "Budget et fiscalité",
        "keywords": [
            "loi de finances",
            "budget",
            "impôt",
            "fiscal",
            "taxe",
            "financement de la sécurité sociale",
            "dette",
            "crédits",
        ],
    },
    {
        "slug": "travail-emploi",
        "label": "Travail et emploi",
        "keywords": [
            "travail",
            "emploi",
            "chômage",
            "salarié",
            "retraite",
            "syndicat",
            "smic",
            "licenciement",
        ],
    },
    {
        "slug": "logement",
        "label": "Logement",
        "keywords": [
            "logement",
            "loyer",
            "locataire",
            "habitat",
            "urbanisme",
            "copropriété",
            "hébergement",
        ],
    },
    {
        "slug": "justice",
        "label": "Justice",
        "keywords": [
            "justice",
            "pénal",
            "tribunal",
            "magistrat",
            "prison",
            "détention",
            "procédure civile",
            "victimes",
        ],
    },
    {
        "slug": "securite",
        "label": "Sécurité",
        "keywords": [
            "sécurité intérieure",
            "police",
            "gendarmerie",
            "terrorisme",
            "délinquance",
            "renseignement",
        ],
    },
    {
        "slug": "immigration",
        "label": "Immigration",
        "keywords": [
            "immigration",
            "asile",
            "étrangers",
            "intégration",
            "nationalité",
            "titre de séjour",
        ],
    },
    {
        "slug": "agriculture",
        "label": "Agriculture",
        "keywords": [
            "agriculture",
            "agricole",
            "agriculteur",
            "élevage",
            "alimentation",
            "pêche",
            "forêt",
        ],
    },
    {
        "slug": "defense",
        "label": "Défense",
        "keywords": [
            "défense",
            "armée",
            "militaire",
            "programmation militaire",
            "anciens combattants",
        ],
    },
    {
        "slug": "numerique",
        "label": "Numérique",
        "keywords": [
            "numérique",
            "internet",
            "données personnelles",
            "intelligence artificielle",
            "plateforme",
            "cybersécurité",
        ],
    },
    {
        "slug": "institutions",
        "label": "Institutions",
        "keywords": [
            "constitution",
            "constitutionnelle",
            "élection",
            "électoral",
            "collectivités territoriales",
            "motion de censure",
            "règlement de l'assemblée",
        ],
    },
    {
        "slug": "transports",
        "label": "Transports",
        "keywords": [
            "transport",
            "mobilité",
            "ferroviaire",
            "route",
            "aérien",
            "véhicule",
        ],
    },
]

TAG_KEYWORDS: dict[str, list[str]] = {t["slug"]: t["keywords"] for t in THEMATIC_TAGS}


def get_tag_keywords(slug: str) -> list[str]:
    """Keywords associated with a tag slug (empty for unknown slugs)."""
    return TAG_KEYWORDS.get(slug, [])
