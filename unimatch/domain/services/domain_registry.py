"""
DomainRegistry - Recognized academic email domains, grouped by region.

The registry is an immutable value built once at startup and handed to the
EmailClassifier. Iteration order is significant: the classifier returns the
first region/suffix that matches, so reordering regions or entries changes
classification output. ``DomainRegistry.default()`` reproduces the order the
product ships with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from unimatch.domain.services.email_types import InstitutionInfo


_DEFAULT_REGIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    # United States
    (
        "us",
        (
            ".edu",
            "harvard.edu",
            "mit.edu",
            "stanford.edu",
            "berkeley.edu",
            "caltech.edu",
            "yale.edu",
            "princeton.edu",
            "columbia.edu",
            "chicago.edu",
        ),
    ),
    # United Kingdom
    (
        "uk",
        (
            ".ac.uk",
            "ox.ac.uk",
            "cam.ac.uk",
            "imperial.ac.uk",
            "ucl.ac.uk",
            "lse.ac.uk",
            "kcl.ac.uk",
            "manchester.ac.uk",
            "warwick.ac.uk",
            "bristol.ac.uk",
            "dur.ac.uk",
        ),
    ),
    # Canada
    (
        "ca",
        (
            ".ca",
            "utoronto.ca",
            "mcgill.ca",
            "ubc.ca",
            "queensu.ca",
            "uwaterloo.ca",
            "mcmaster.ca",
            "yorku.ca",
            "sfu.ca",
            "carleton.ca",
        ),
    ),
    # Australia
    (
        "au",
        (
            ".edu.au",
            "sydney.edu.au",
            "melbourne.edu.au",
            "unsw.edu.au",
            "anu.edu.au",
            "uq.edu.au",
            "monash.edu.au",
            "adelaide.edu.au",
            "uwa.edu.au",
            "uts.edu.au",
        ),
    ),
    # Germany
    (
        "de",
        (
            ".uni-",
            ".tu-",
            ".fh-",
            ".hs-",
            "uni-muenchen.de",
            "uni-heidelberg.de",
            "uni-berlin.de",
            "tu-berlin.de",
            "rwth-aachen.de",
            "kit.edu",
        ),
    ),
    # France
    (
        "fr",
        (
            ".edu",
            "sorbonne-universite.fr",
            "ens.fr",
            "polytechnique.edu",
            "sciences-po.fr",
            "insead.edu",
            "hec.fr",
            "essec.edu",
        ),
    ),
    # Netherlands
    (
        "nl",
        (
            ".nl",
            "uva.nl",
            "vu.nl",
            "tue.nl",
            "tudelft.nl",
            "rug.nl",
            "uu.nl",
            "leiden.edu",
            "tilburguniversity.edu",
        ),
    ),
    # Singapore
    (
        "sg",
        (
            ".edu.sg",
            "nus.edu.sg",
            "ntu.edu.sg",
            "smu.edu.sg",
            "sutd.edu.sg",
            "sit.edu.sg",
        ),
    ),
    # New Zealand
    (
        "nz",
        (
            ".ac.nz",
            "auckland.ac.nz",
            "otago.ac.nz",
            "canterbury.ac.nz",
            "victoria.ac.nz",
            "massey.ac.nz",
        ),
    ),
    # Japan
    (
        "jp",
        (
            ".ac.jp",
            "u-tokyo.ac.jp",
            "kyoto-u.ac.jp",
            "titech.ac.jp",
            "osaka-u.ac.jp",
            "tohoku.ac.jp",
        ),
    ),
    # South Korea
    (
        "kr",
        (
            ".ac.kr",
            "snu.ac.kr",
            "kaist.ac.kr",
            "postech.ac.kr",
            "yonsei.ac.kr",
        ),
    ),
)

_DEFAULT_KEYWORDS: tuple[str, ...] = (
    "university",
    "college",
    "institute",
    "school",
    "uni.",
    "univ.",
    "student.",
    "campus",
)

_DEFAULT_EDUCATIONAL_TLDS: tuple[str, ...] = (".edu", ".ac.", ".edu.")

_DEFAULT_INSTITUTIONS: dict[str, InstitutionInfo] = {
    "harvard.edu": InstitutionInfo("Harvard University", "United States"),
    "mit.edu": InstitutionInfo("Massachusetts Institute of Technology", "United States"),
    "stanford.edu": InstitutionInfo("Stanford University", "United States"),
    "ox.ac.uk": InstitutionInfo("University of Oxford", "United Kingdom"),
    "cam.ac.uk": InstitutionInfo("University of Cambridge", "United Kingdom"),
    "nus.edu.sg": InstitutionInfo("National University of Singapore", "Singapore"),
}

_DEFAULT_POPULAR_DOMAINS: tuple[str, ...] = (
    "student.university.edu",
    "mail.university.edu",
    "alumni.university.edu",
    "university.ac.uk",
    "student.uni.edu",
)


@dataclass(frozen=True)
class DomainRegistry:
    """
    Immutable lookup tables used by the EmailClassifier.

    Attributes:
        regions: Ordered (region_code, suffixes) pairs
        keywords: Ordered generic keywords (the "global" fallback list)
        educational_tlds: Ordered TLD fragments checked after keywords
        institutions: Exact domain -> friendly institution name
        popular_domains: Ordered autocomplete catalog for suggestions
    """

    regions: tuple[tuple[str, tuple[str, ...]], ...]
    keywords: tuple[str, ...]
    educational_tlds: tuple[str, ...] = _DEFAULT_EDUCATIONAL_TLDS
    institutions: Mapping[str, InstitutionInfo] = field(default_factory=dict)
    popular_domains: tuple[str, ...] = ()

    def __post_init__(self):
        codes = [code for code, _ in self.regions]
        if len(codes) != len(set(codes)):
            raise ValueError("Region codes must be unique")
        if "global" in codes:
            raise ValueError("'global' is reserved for keywords")

    @classmethod
    def default(cls) -> DomainRegistry:
        return cls(
            regions=_DEFAULT_REGIONS,
            keywords=_DEFAULT_KEYWORDS,
            institutions=dict(_DEFAULT_INSTITUTIONS),
            popular_domains=_DEFAULT_POPULAR_DOMAINS,
        )

    def iter_suffixes(self) -> Iterator[tuple[str, str]]:
        """Yield (region, suffix) in registry order."""
        for region, suffixes in self.regions:
            for suffix in suffixes:
                yield region, suffix

    def institution_for(self, domain: str) -> Optional[InstitutionInfo]:
        return self.institutions.get(domain)
