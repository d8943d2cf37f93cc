# backend/app/api/projects.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import Response
from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from ..database import get_db, utcnow
from ..models import Project, File, ChatMessage
from ..schemas.project import ProjectCreate, ProjectUpdate, Project as ProjectSchema, ProjectDetail
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/projects", tags=["projects"])


def get_project_or_404(project_id: int, db: Session) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        api_logger.warning("Project not found", extra={"project_id": project_id})
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("", response_model=List[ProjectSchema])
async def list_projects(db: Session = Depends(get_db)):
    """List all projects, most recently updated first"""
    api_logger.info("Starting projects list operation", extra={
        "endpoint": "/api/projects",
        "method": "GET"
    })

    try:
        projects = db.query(Project) \
            .order_by(Project.updated_at.desc(), Project.id.desc()) \
            .all()
        api_logger.info(f"Found {len(projects)} projects")
        return projects
    except Exception as e:
        api_logger.error("Failed to list projects", extra={"error": str(e)})
        raise


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Fetching project", extra={"project_id": project_id})

    try:
        project = get_project_or_404(project_id, db)

        file_count = db.query(func.count(File.id)) \
            .filter(File.project_id == project_id) \
            .scalar()
        message_count = db.query(func.count(ChatMessage.id)) \
            .filter(ChatMessage.project_id == project_id) \
            .scalar()

        project_data = ProjectDetail.model_validate(project)
        project_data.file_count = file_count or 0
        project_data.chat_message_count = message_count or 0

        api_logger.info("Project retrieved successfully", extra={
            "project_id": project_id,
            "file_count": file_count
        })
        return project_data
    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Failed to get project", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise


@router.post("", response_model=ProjectSchema, status_code=status.HTTP_201_CREATED)
async def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new project", extra={"project_name": project.name})

    try:
        db_project = Project(**project.model_dump())
        db.add(db_project)
        db.commit()
        db.refresh(db_project)

        api_logger.info("Project created successfully", extra={
            "project_id": db_project.id,
            "project_name": db_project.name
        })
        return db_project
    except Exception as e:
        api_logger.error("Failed to create project", extra={
            "project_name": project.name,
            "error": str(e)
        })
        db.rollback()
        raise


@router.put("/{project_id}", response_model=ProjectSchema)
async def update_project(project_id: int, project: ProjectUpdate, db: Session = Depends(get_db)):
    api_logger.info("Updating project", extra={"project_id": project_id})

    try:
        db_project = get_project_or_404(project_id, db)

        changes = project.model_dump(exclude_unset=True)
        if "name" in changes and changes["name"] is None:
            raise HTTPException(status_code=400, detail="Project name cannot be empty")

        for field, value in changes.items():
            setattr(db_project, field, value)
        # Touch even when nothing changed so ordering reflects the last write
        db_project.updated_at = utcnow()

        db.commit()
        db.refresh(db_project)

        api_logger.info("Project updated successfully", extra={
            "project_id": project_id,
            "fields": sorted(changes)
        })
        return db_project
    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Failed to update project", extra={
            "project_id": project_id,
            "error": str(e)
        })
        db.rollback()
        raise


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Deleting project", extra={"project_id": project_id})

    try:
        project = get_project_or_404(project_id, db)

        file_count = len(project.files)
        message_count = len(project.chat_messages)

        # Cascades to the project's files and chat messages
        db.delete(project)
        db.commit()

        api_logger.info(f"Successfully deleted project {project_id}", extra={
            "deleted_files": file_count,
            "deleted_messages": message_count
        })
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete project: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete project")
