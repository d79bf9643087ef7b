"""Gallery resolver for the hero marquee."""

from pathlib import Path

import structlog

from .catalog import FALLBACK_GALLERY_IMAGES, GALLERY_IMAGE_EXTENSIONS
from .errors import handle_error
from .filesystem import FileSystemService

log = structlog.stdlib.get_logger()


class GalleryService:
    """Resolves the image references shown in the marquee.

    The directory is read on every call; an unreadable or empty directory
    yields the fallback list, so resolution never fails for the caller.
    """

    def __init__(
        self,
        filesystem: FileSystemService,
        gallery_directory: Path,
        url_prefix: str = "/gallery",
        fallback_images: tuple[str, ...] = FALLBACK_GALLERY_IMAGES,
    ) -> None:
        self.filesystem = filesystem
        self.gallery_directory = gallery_directory
        self.url_prefix = url_prefix.rstrip("/")
        self.fallback_images = fallback_images

    def resolve_images(self) -> list[str]:
        """Return the ordered image references for the marquee."""
        try:
            files = self.filesystem.list_files(
                self.gallery_directory, suffixes=GALLERY_IMAGE_EXTENSIONS
            )
        except OSError as e:
            handle_error(
                e,
                operation="resolve_gallery",
                component="gallery",
                context={"path": str(self.gallery_directory)},
            )
            return list(self.fallback_images)

        if not files:
            log.info(
                "Gallery directory has no images, using fallback",
                directory=str(self.gallery_directory),
            )
            return list(self.fallback_images)

        images = [f"{self.url_prefix}/{path.name}" for path in files]
        log.debug("Gallery resolved", count=len(images))
        return images
