# backend/app/api/files.py
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.responses import Response

from ..database import get_db, utcnow
from ..models import File
from ..schemas.file import (
    FileCreate, FileUpdate, File as FileSchema, FileImportRequest, FileImportResult
)
from ..schemas.tree import FileTreeNode
from ..services.file_tree import build_file_tree
from ..utils.languages import detect_language
from ..utils.logging import api_logger
from .projects import get_project_or_404

router = APIRouter(prefix="/api", tags=["files"])


def _duplicate_path_error(project_id: int, path: str) -> HTTPException:
    api_logger.warning("File path already exists in project", extra={
        "project_id": project_id,
        "path": path
    })
    return HTTPException(status_code=400, detail=f"File '{path}' already exists in project")


def _find_by_path(db: Session, project_id: int, path: str) -> Optional[File]:
    return db.query(File) \
        .filter(File.project_id == project_id, File.path == path) \
        .first()


@router.get("/projects/{project_id}/files", response_model=List[FileSchema])
async def list_project_files(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Listing files for project", extra={
        "project_id": project_id,
        "operation": "list_project_files"
    })

    get_project_or_404(project_id, db)
    files = db.query(File) \
        .filter(File.project_id == project_id) \
        .order_by(File.path) \
        .all()

    api_logger.info("Successfully listed project files", extra={
        "project_id": project_id,
        "file_count": len(files)
    })
    return files


@router.get("/projects/{project_id}/tree", response_model=List[FileTreeNode])
async def get_project_tree(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Building file tree", extra={"project_id": project_id})

    get_project_or_404(project_id, db)
    start_time = time.time()
    files = db.query(File) \
        .filter(File.project_id == project_id) \
        .order_by(File.path, File.id) \
        .all()
    tree = [FileTreeNode.model_validate(node) for node in build_file_tree(files)]

    api_logger.info("Built file tree", extra={
        "project_id": project_id,
        "file_count": len(files),
        "root_nodes": len(tree),
        "execution_time_ms": round((time.time() - start_time) * 1000, 2)
    })
    return tree


@router.post("/projects/{project_id}/files/import", response_model=FileImportResult)
async def import_project_files(project_id: int, request: FileImportRequest, db: Session = Depends(get_db)):
    """Create or overwrite a batch of files, matched by path"""
    api_logger.info("Importing files into project", extra={
        "project_id": project_id,
        "file_count": len(request.files)
    })

    get_project_or_404(project_id, db)
    try:
        result = FileImportResult()
        imported = {}
        for entry in request.files:
            db_file = imported.get(entry.path) or _find_by_path(db, project_id, entry.path)
            if db_file is None:
                db_file = File(
                    project_id=project_id,
                    path=entry.path,
                    content=entry.content,
                    language=detect_language(entry.path)
                )
                db.add(db_file)
                db.flush()
                result.created += 1
            else:
                db_file.content = entry.content
                db_file.is_modified = False
                result.updated += 1
            imported[entry.path] = db_file

        db.commit()
        for db_file in imported.values():
            db.refresh(db_file)
        result.files = [FileSchema.model_validate(f) for f in sorted(imported.values(), key=lambda f: f.path)]

        api_logger.info("Imported files", extra={
            "project_id": project_id,
            "created": result.created,
            "updated": result.updated
        })
        return result
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to import files", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise


@router.get("/files", response_model=List[FileSchema])
async def list_files(
        project_id: Optional[int] = None,
        path: Optional[str] = None,
        db: Session = Depends(get_db)
):
    """List files, optionally narrowed to one project and/or one exact path"""
    api_logger.info("Listing files", extra={"project_id": project_id, "path": path})

    query = db.query(File)
    if project_id is not None:
        query = query.filter(File.project_id == project_id)
    if path is not None:
        query = query.filter(File.path == path)
    return query.order_by(File.project_id, File.path).all()


@router.get("/files/{file_id}", response_model=FileSchema)
async def get_file(file_id: int, db: Session = Depends(get_db)):
    api_logger.info("Fetching file", extra={"file_id": file_id})

    db_file = db.query(File).filter(File.id == file_id).first()
    if not db_file:
        api_logger.warning("File not found", extra={"file_id": file_id})
        raise HTTPException(status_code=404, detail="File not found")
    return db_file


@router.post("/files", response_model=FileSchema, status_code=status.HTTP_201_CREATED)
async def create_file(file: FileCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new file", extra={
        "project_id": file.project_id,
        "path": file.path
    })

    get_project_or_404(file.project_id, db)
    if _find_by_path(db, file.project_id, file.path):
        raise _duplicate_path_error(file.project_id, file.path)

    try:
        db_file = File(**file.model_dump())
        if not db_file.language:
            db_file.language = detect_language(file.path)
        db.add(db_file)
        db.commit()
        db.refresh(db_file)

        api_logger.info("Successfully created file", extra={
            "file_id": db_file.id,
            "project_id": db_file.project_id,
            "language": db_file.language
        })
        return db_file
    except IntegrityError:
        db.rollback()
        raise _duplicate_path_error(file.project_id, file.path)
    except Exception as e:
        api_logger.error("Error creating file", extra={
            "project_id": file.project_id,
            "path": file.path,
            "error": str(e)
        })
        db.rollback()
        raise


@router.put("/files/{file_id}", response_model=FileSchema)
async def update_file(file_id: int, file: FileUpdate, db: Session = Depends(get_db)):
    api_logger.info("Updating file", extra={"file_id": file_id})

    db_file = db.query(File).filter(File.id == file_id).first()
    if not db_file:
        api_logger.warning("File not found for update", extra={"file_id": file_id})
        raise HTTPException(status_code=404, detail="File not found")

    changes = file.model_dump(exclude_unset=True)
    if "path" in changes:
        new_path = changes["path"]
        if new_path is None:
            raise HTTPException(status_code=400, detail="File path cannot be empty")
        if new_path != db_file.path:
            if _find_by_path(db, db_file.project_id, new_path):
                raise _duplicate_path_error(db_file.project_id, new_path)
            if "language" not in changes:
                changes["language"] = detect_language(new_path)

    try:
        for field, value in changes.items():
            setattr(db_file, field, value)
        db_file.updated_at = utcnow()

        db.commit()
        db.refresh(db_file)

        api_logger.info("Successfully updated file", extra={
            "file_id": file_id,
            "fields": sorted(changes)
        })
        return db_file
    except IntegrityError:
        db.rollback()
        raise _duplicate_path_error(db_file.project_id, changes.get("path", db_file.path))
    except Exception as e:
        api_logger.error("Error updating file", extra={
            "file_id": file_id,
            "error": str(e)
        })
        db.rollback()
        raise


@router.delete("/files/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(file_id: int, db: Session = Depends(get_db)):
    api_logger.info("Deleting file", extra={"file_id": file_id})

    db_file = db.query(File).filter(File.id == file_id).first()
    if not db_file:
        api_logger.warning("File not found for deletion", extra={"file_id": file_id})
        raise HTTPException(status_code=404, detail="File not found")

    try:
        db.delete(db_file)
        db.commit()
        api_logger.info(f"Successfully deleted file {file_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete file: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete file")
