"""Progress banner rendering."""

from foliowatch.rendering.banner import BannerView, NullProgressBanner, ProgressBanner, describe_banner
from foliowatch.rendering.rich import RichProgressBanner

__all__ = ["BannerView", "NullProgressBanner", "ProgressBanner", "RichProgressBanner", "describe_banner"]
