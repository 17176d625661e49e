"""Environment-driven app settings and UI variant toggles"""
import os
from dataclasses import dataclass, replace

# Feature toggles per UI variant
VARIANTS = {
    'classic': dict(lead_flow=False, csv_export=False, pdf_export=False, series_toggle=False),
    'lead-flow': dict(lead_flow=True, csv_export=True, pdf_export=False, series_toggle=True),
    'audit': dict(lead_flow=True, csv_export=True, pdf_export=True, series_toggle=True),
}
DEFAULT_VARIANT = 'lead-flow'

TRUTHY = {'1', 'true', 'yes', 'on'}
FALSY = {'0', 'false', 'no', 'off'}


@dataclass
class AppSettings:
    title: str = "All-on-X ROI Calculator"
    variant: str = DEFAULT_VARIANT
    lead_flow: bool = True
    csv_export: bool = True
    pdf_export: bool = False
    series_toggle: bool = True
    show_footer: bool = True
    brand_url: str = ""
    logo_path: str = ""
    log_level: str = "INFO"


def parse_bool(raw, default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    val = raw.strip().lower()
    if val in TRUTHY:
        return True
    if val in FALSY:
        return False
    raise ValueError(f"Expected a boolean, got '{raw}'")


def settings_for_variant(variant: str, **overrides) -> AppSettings:
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant '{variant}'. Available: {', '.join(VARIANTS)}")
    return replace(AppSettings(variant=variant, **VARIANTS[variant]), **overrides)


def load_settings(env=None) -> AppSettings:
    """Build settings from ROI_* environment variables"""
    env = os.environ if env is None else env
    variant = env.get("ROI_VARIANT", DEFAULT_VARIANT).strip() or DEFAULT_VARIANT
    base = settings_for_variant(variant)
    return replace(
        base,
        title=env.get("ROI_APP_TITLE", base.title),
        show_footer=parse_bool(env.get("ROI_SHOW_FOOTER"), base.show_footer),
        pdf_export=parse_bool(env.get("ROI_PDF_EXPORT"), base.pdf_export),
        brand_url=env.get("ROI_BRAND_URL", base.brand_url).strip(),
        logo_path=env.get("ROI_LOGO_PATH", base.logo_path).strip(),
        log_level=env.get("ROI_LOG_LEVEL", base.log_level).strip().upper() or base.log_level,
    )
