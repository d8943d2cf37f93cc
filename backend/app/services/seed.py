# backend/app/services/seed.py
from sqlalchemy.orm import Session

from ..models import Project, File
from ..utils.languages import detect_language
from ..utils.logging import service_logger

DEMO_PROJECT = {
    "name": "My Demo Project",
    "description": "Demo project for the AI-assisted editor",
}

DEMO_FILES = {
    "index.html": """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>My Demo Page</title>
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <div class="card">
        <h1>Welcome to the AI editor!</h1>
        <p>This is a demo file. Use the AI chat to edit it!</p>
        <button class="button" onclick="alert(greet('World'))">Click here</button>
    </div>
    <script src="script.js"></script>
</body>
</html>""",
    "script.js": """// Demo script
function greet(name) {
    return "Hello, " + name + "!";
}

function add(a, b) {
    return a + b;
}

// Try asking the AI to edit this code!
console.log(greet("User"));
console.log("Result:", add(5, 3));""",
    "styles.css": """/* Demo styles */
.button {
    background-color: #007bff;
    color: white;
    padding: 10px 20px;
    border: none;
    border-radius: 4px;
    cursor: pointer;
}

.button:hover {
    background-color: #0056b3;
}

.card {
    border: 1px solid #ddd;
    border-radius: 8px;
    padding: 16px;
    margin: 10px 0;
    box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}""",
}


class SeedService:
    """Populates an empty store with a demo project"""

    @staticmethod
    def seed_demo_data(db: Session) -> Project | None:
        if db.query(Project).first() is not None:
            service_logger.info("Store already has projects, skipping demo data")
            return None

        try:
            project = Project(**DEMO_PROJECT)
            db.add(project)
            db.flush()

            for path, content in DEMO_FILES.items():
                db.add(File(
                    project_id=project.id,
                    path=path,
                    content=content,
                    language=detect_language(path)
                ))

            db.commit()
            db.refresh(project)
            service_logger.info("Seeded demo project", extra={
                "project_id": project.id,
                "file_count": len(DEMO_FILES)
            })
            return project

        except Exception as e:
            db.rollback()
            service_logger.error("Failed to seed demo data", extra={"error": str(e)})
            raise


seed_service = SeedService()
