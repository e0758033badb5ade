from sqlalchemy import Column, String, Text, text
from database.db import Base

# MySQL 8 은 VARCHAR 컬럼에 괄호로 감싼 표현식 기본값만 허용
_NOW_DEFAULT = text("(CURRENT_TIMESTAMP)")

class Event(Base):
    __tablename__ = "events"  # 캘린더 일정 테이블

    id = Column(String(36), primary_key=True)                # 일정 고유 ID (UUID 문자열, PK)
    title = Column(Text, nullable=False)                     # 일정 제목
    description = Column(Text, nullable=True)                # 상세 설명 (NULL 가능)
    # 날짜/시간은 문자열로 저장 → 정렬·범위 비교가 문자열(사전순) 기준으로 동작
    start_date = Column(String(10), nullable=False)          # 시작 날짜 (YYYY-MM-DD)
    end_date = Column(String(10), nullable=False)            # 종료 날짜 (YYYY-MM-DD)
    start_time = Column(String(5), nullable=False)           # 시작 시간 (HH:MM)
    end_time = Column(String(5), nullable=False)             # 종료 시간 (HH:MM)
    creator_name = Column(Text, nullable=False)              # 작성자 이름
    creator_email = Column(Text, nullable=False)             # 작성자 이메일 (형식 검증 없음)
    location = Column(Text, nullable=True)                   # 장소 (NULL 가능)
    created_at = Column(String(40), server_default=_NOW_DEFAULT)  # 생성 시각
    updated_at = Column(String(40), server_default=_NOW_DEFAULT)  # 수정 시각

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}
