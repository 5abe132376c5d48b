from typing import List, Optional

from core.data_models import PageContent, PageMetadata


def page_content_to_markdown(page: PageContent) -> str:
    lines = [
        f"# {page.title}\n\n",
        f"**URL:** {page.url}\n",
        f"**Word Count:** {page.word_count}\n\n",
        "## Content\n\n",
        page.content,
    ]
    if page.images:
        lines.append("\n\n## Images Found\n")
        lines.append("\n".join(f"- ![{img.alt}]({img.src})" for img in page.images))
    return "".join(lines)


def elements_to_markdown(url: str, selector: str, values: List[str], attribute: Optional[str] = None) -> str:
    lines = [
        f"# Elements extracted from {url}\n\n",
        f"**Selector:** `{selector}`",
    ]
    if attribute:
        lines.append(f"\n**Attribute:** `{attribute}`")
    lines.append(f"\n**Found:** {len(values)} elements\n\n")
    lines.append("\n".join(f"{i}. {value}" for i, value in enumerate(values, start=1)))
    return "".join(lines)


def metadata_to_markdown(url: str, metadata: PageMetadata) -> str:
    body = "\n".join(f"**{label}:** {value}" for label, value in metadata.present_fields())
    return f"# Metadata for {url}\n\n{body}"
