"""
EmailClassifier - Decides whether an email address belongs to a university.

Called on every keystroke of the signup form, so every method is pure,
synchronous and total: any string in, a result out, never an exception.

Classification steps (first hit wins):
1. Registry suffix match        -> valid, HIGH confidence, country set
2. Generic keyword in domain    -> valid, MEDIUM confidence
3. Educational TLD in domain    -> valid, MEDIUM confidence
4. Nothing matched              -> invalid, HIGH confidence
"""

from typing import Optional

from unimatch.domain.services.domain_registry import DomainRegistry
from unimatch.domain.services.email_types import (
    Confidence,
    InstitutionInfo,
    ValidationResult,
)


class EmailClassifier:
    def __init__(self, registry: DomainRegistry):
        self._registry = registry

    def classify(self, email: str) -> ValidationResult:
        """
        Classify an email address as academic or not.

        Args:
            email: Raw user input; anything after the first '@' is the domain

        Returns:
            ValidationResult with verdict, confidence and a readable reason
        """
        normalized = (email or "").strip().lower()
        _, at, domain = normalized.partition("@")

        if not at or not domain:
            return ValidationResult(
                is_valid=False,
                domain="",
                confidence=Confidence.HIGH,
                reason="Invalid email format",
            )

        for region, suffix in self._registry.iter_suffixes():
            if domain == suffix or domain.endswith(suffix):
                return ValidationResult(
                    is_valid=True,
                    domain=domain,
                    confidence=Confidence.HIGH,
                    reason=f"Recognized {region.upper()} university domain",
                    country=region,
                )

        for keyword in self._registry.keywords:
            if keyword in domain:
                return ValidationResult(
                    is_valid=True,
                    domain=domain,
                    confidence=Confidence.MEDIUM,
                    reason=f"Contains university keyword: {keyword}",
                )

        for tld in self._registry.educational_tlds:
            if tld in domain:
                return ValidationResult(
                    is_valid=True,
                    domain=domain,
                    confidence=Confidence.MEDIUM,
                    reason=f"Contains educational TLD: {tld}",
                )

        return ValidationResult(
            is_valid=False,
            domain=domain,
            confidence=Confidence.HIGH,
            reason="Not recognized as a university email domain",
        )

    def institution_info(self, email: str) -> Optional[InstitutionInfo]:
        """Friendly institution name for well-known domains, else None."""
        validation = self.classify(email)
        if not validation.is_valid:
            return None
        return self._registry.institution_for(validation.domain)

    def suggest_domains(self, partial_email: str) -> list[str]:
        """
        Autocomplete hints: the typed local part joined to popular domains.

        Suggestions are hints only and are not re-checked against classify().
        """
        partial_email = partial_email or ""
        local_part, at, _ = partial_email.partition("@")
        if not at or not local_part:
            return []
        return [f"{local_part}@{domain}" for domain in self._registry.popular_domains]
