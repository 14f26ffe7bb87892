"""
Curated default exercise set.

Substituted at the catalog boundary when the real catalog cannot be read,
so the engine always receives a non-empty list.
"""

from typing import List

from plan_engine.domain.models import Exercise

DEFAULT_EXERCISES: List[Exercise] = [
    # Bodyweight / beginner
    Exercise(
        id="sq-001",
        name="Squat",
        description="Feet shoulder-width apart, sit the hips back and keep the back straight. Stand once the thighs are parallel to the floor.",
        video_url="https://media.giphy.com/media/1qfKN8Dt0CRdCRzs9q/giphy.gif",
        duration_seconds=45,
        tags=["goal:muscle", "goal:tone", "difficulty:beginner", "equipment:bodyweight", "type:strength"],
    ),
    Exercise(
        id="pu-001",
        name="Knee Push-up",
        description="Knees on the floor, hands wider than the shoulders. Brace the core, lower the chest, then press up.",
        video_url="https://media.giphy.com/media/S3n6idriKnbnm/giphy.gif",
        duration_seconds=30,
        tags=["goal:muscle", "goal:tone", "difficulty:beginner", "equipment:bodyweight", "type:strength"],
    ),
    Exercise(
        id="jj-001",
        name="Jumping Jacks",
        description="Jump the feet apart while raising the arms, then jump back. Keep a light, steady rhythm.",
        video_url="https://media.giphy.com/media/l3vR8IAtvPQuDgOHu/giphy.gif",
        duration_seconds=60,
        tags=["goal:fat-loss", "difficulty:beginner", "equipment:bodyweight", "type:cardio"],
    ),
    Exercise(
        id="plank-001",
        name="Plank",
        description="Forearms on the floor, body in a straight line. Squeeze the abs and glutes and keep breathing.",
        video_url="https://media.giphy.com/media/xT8qBff8cRRFfCF2qA/giphy.gif",
        duration_seconds=30,
        tags=["goal:tone", "difficulty:beginner", "equipment:bodyweight", "type:core"],
    ),
    # Bodyweight / intermediate and advanced
    Exercise(
        id="pu-002",
        name="Push-up",
        description="Legs straight, body in a line. Lower the chest to the floor with elbows at 45 degrees.",
        video_url="https://media.giphy.com/media/3o6Zt5Z2W4R6v4J6da/giphy.gif",
        duration_seconds=40,
        tags=["goal:muscle", "difficulty:intermediate", "difficulty:advanced", "equipment:bodyweight", "type:strength"],
    ),
    Exercise(
        id="burpee-001",
        name="Burpees",
        description="Squat and plant the hands, jump back to a plank, push-up, jump the feet in, then jump up.",
        video_url="https://media.giphy.com/media/23hPPMRgPxbNefAGzL/giphy.gif",
        duration_seconds=40,
        tags=["goal:fat-loss", "goal:muscle", "difficulty:advanced", "equipment:bodyweight", "type:hiit"],
    ),
    Exercise(
        id="lunge-001",
        name="Lunges",
        description="Step forward and lower until both knees reach 90 degrees. Keep the back knee off the floor and alternate legs.",
        video_url="https://media.giphy.com/media/l3q2Q3sUEk1d40nKS/giphy.gif",
        duration_seconds=45,
        tags=["goal:tone", "goal:muscle", "difficulty:intermediate", "equipment:bodyweight", "type:strength"],
    ),
    # Dumbbell
    Exercise(
        id="db-press-001",
        name="Dumbbell Shoulder Press",
        description="Hold the dumbbells at the shoulders, press overhead until the arms are straight, lower slowly.",
        video_url="https://media.giphy.com/media/3o7TKy3K9wZ2p66vTy/giphy.gif",
        duration_seconds=45,
        tags=["goal:muscle", "difficulty:intermediate", "equipment:dumbbell", "type:strength"],
    ),
    Exercise(
        id="db-row-001",
        name="Dumbbell Row",
        description="Support yourself with one hand, keep the back flat and drive the other elbow back to row the dumbbell.",
        video_url="https://media.giphy.com/media/3o7TKVpC5qJ7y3q7gA/giphy.gif",
        duration_seconds=45,
        tags=["goal:muscle", "goal:tone", "difficulty:intermediate", "equipment:dumbbell", "type:strength"],
    ),
    Exercise(
        id="db-goblet-001",
        name="Goblet Squat",
        description="Hold one dumbbell at the chest with both hands and squat.",
        video_url="https://media.giphy.com/media/3o7TKM8v9v9q5z9q0U/giphy.gif",
        duration_seconds=45,
        tags=["goal:muscle", "difficulty:intermediate", "equipment:dumbbell", "type:strength"],
    ),
    # Band
    Exercise(
        id="band-pull-001",
        name="Band Face Pull",
        description="Pull the band toward the face with the elbows flared, squeezing the rear shoulders.",
        video_url="https://media.giphy.com/media/3o7TKsQ8f9q5z9q0U/giphy.gif",
        duration_seconds=40,
        tags=["goal:tone", "difficulty:beginner", "equipment:band", "type:strength"],
    ),
]
