"""Breed image upload orchestration.

This module sequences the Dog CEO catalog and the Yandex.Disk storage:
create the target folder, pick one random image per sub-breed (or one for
the breed itself when it has none) and ask the storage to fetch each image
by URL. `verify_uploads` then lists the folder and reports file names.

The functions here only depend on the `BreedImageSource` / `FileStorage`
contracts, so tests drive them with in-memory fakes. The CLI keeps all
printing concerns; this layer only logs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx
from loguru import logger

from adapters.dog_api import DogApiClient
from adapters.yandex_disk import YandexDiskClient
from core.config import DEFAULT_FOLDER, AppSettings
from core.domain.models import FolderStatus
from core.domain.results import ErrorKind
from core.interfaces import BreedImageSource, FileStorage


@dataclass
class UploadAttempt:
    """One upload-by-reference request issued to the storage."""

    file_name: str
    source_url: str
    ok: bool
    error: ErrorKind | None = None
    detail: str | None = None


@dataclass
class UploadReport:
    """Output of `upload_breed_images`."""

    breed: str
    folder: str
    folder_status: FolderStatus = FolderStatus.FAILED
    sub_breeds: list[str] = field(default_factory=list)
    attempts: list[UploadAttempt] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def uploaded(self) -> list[str]:
        return [a.file_name for a in self.attempts if a.ok]


@dataclass
class WorkflowResult:
    """Upload report plus the file names seen by the verifier."""

    report: UploadReport
    files: list[str] = field(default_factory=list)


def image_file_name(breed: str, sub_breed: str | None = None) -> str:
    """`{breed}_{sub_breed}.jpg`, or `{breed}.jpg` without a sub-breed."""

    if sub_breed:
        return f"{breed}_{sub_breed}.jpg"
    return f"{breed}.jpg"


async def _upload_one(
    *,
    report: UploadReport,
    images: BreedImageSource,
    storage: FileStorage,
    breed: str,
    sub_breed: str | None,
) -> None:
    file_name = image_file_name(breed, sub_breed)
    image = await images.random_image(breed, sub_breed)
    if not image.value:
        logger.warning(f"No image for {file_name}, skipping")
        report.skipped.append(file_name)
        return

    result = await storage.upload_from_url(report.folder, image.value, file_name)
    report.attempts.append(
        UploadAttempt(
            file_name=file_name,
            source_url=image.value,
            ok=result.ok,
            error=result.error,
            detail=result.detail,
        )
    )


async def upload_breed_images(
    *,
    breed: str,
    images: BreedImageSource,
    storage: FileStorage,
    folder: str = DEFAULT_FOLDER,
) -> UploadReport:
    """Upload one random image per sub-breed of `breed` into `folder`.

    Uploads run strictly one after another, in the order the catalog returns
    the sub-breeds. A failed folder creation does not stop the uploads.
    """

    breed = breed.strip()
    if not breed:
        raise ValueError("breed must be a non-empty string")

    report = UploadReport(breed=breed, folder=folder)

    created = await storage.create_folder(folder)
    report.folder_status = created.value

    sub_breeds = await images.list_sub_breeds(breed)
    report.sub_breeds = list(sub_breeds.value)

    if report.sub_breeds:
        for sub_breed in report.sub_breeds:
            await _upload_one(report=report, images=images, storage=storage, breed=breed, sub_breed=sub_breed)
    else:
        await _upload_one(report=report, images=images, storage=storage, breed=breed, sub_breed=None)

    logger.info(
        f"Breed '{breed}': {len(report.uploaded)} uploaded, "
        f"{len(report.attempts) - len(report.uploaded)} failed, {len(report.skipped)} skipped"
    )
    return report


async def verify_uploads(*, storage: FileStorage, folder: str = DEFAULT_FOLDER) -> list[str]:
    """Log and return the names of the files stored in `folder`.

    Never raises: any failure is logged and yields an empty list.
    """

    try:
        listing = await storage.list_items(folder)
        names: list[str] = []
        for item in listing.value:
            if not item.is_file:
                continue
            logger.info(f"Found file: {item.name}")
            names.append(item.name)
        return names
    except Exception:
        logger.exception(f"Unexpected error while checking uploaded files in '{folder}'")
        return []


async def run_workflow(
    *,
    breed: str,
    token: str,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WorkflowResult:
    """Upload images for `breed` and verify the target folder.

    The token is passed explicitly; nothing in this layer reads the environment.
    """

    settings = settings or AppSettings()
    images = DogApiClient(settings, transport=transport)
    storage = YandexDiskClient(token, settings, transport=transport)

    report = await upload_breed_images(
        breed=breed,
        images=images,
        storage=storage,
        folder=settings.folder_name,
    )
    files = await verify_uploads(storage=storage, folder=settings.folder_name)
    return WorkflowResult(report=report, files=files)
